import argparse
import sys

import whenpresent.apptools
import whenpresent.conditionals
import whenpresent.directives
import whenpresent.reporter
import whenpresent.resolver
import whenpresent.wrappedos
from whenpresent.errors import UnreadableSource, WhenPresentError


class _StoreOnce(argparse.Action):
    """Store the value but refuse to have it given a second time"""

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest, None) is not None:
            parser.error("Path specified more than once")
        setattr(namespace, self.dest, values)


def add_arguments(cap):
    cap.add(
        "--file",
        required=True,
        action=_StoreOnce,
        help="Path to the source file to read from")
    cap.add(
        "--lines",
        required=True,
        nargs="+",
        type=int,
        help="The line number(s) to calculate")
    cap.add(
        "--style",
        choices=whenpresent.reporter.STYLES,
        default="text",
        help="How to lay out the requirements. "
             "indent shows nested conditionals indented under their parent")


def analyse(args, file=None):
    """Build the conditional tree for args.file then report on args.lines.

    Raises a WhenPresentError before anything is printed if the file
    or the requested lines are unusable.
    """
    try:
        lines = list(whenpresent.directives.read_lines(args.file))
    except OSError as err:
        raise UnreadableSource(args.file, err.strerror) from err
    whenpresent.conditionals.check_target_lines(args.lines, len(lines))

    tree = whenpresent.conditionals.build_tree(lines, verbose=args.verbose)
    if args.verbose >= 1:
        print(
            "Analysed {0}: {1} lines, {2} conditionals".format(
                args.file, tree.line_count, len(tree)))
    if args.verbose >= 4:
        print("\n".join(whenpresent.reporter.describe_tree(tree)))

    results = whenpresent.resolver.resolve_lines(tree, args.lines)
    whenpresent.reporter.report(results, style=args.style, file=file)
    return results


def main(argv=None):
    cap = whenpresent.apptools.create_parser(
        "Calculates and displays the circumstances under which particular "
        "line number(s) are present when compiling the specified source file "
        "with respect to preprocessor definitions.",
        argv=argv)
    add_arguments(cap)
    args = whenpresent.apptools.parseargs(cap, argv)

    if not whenpresent.wrappedos.isfile(args.file):
        sys.stderr.write(
            'ERROR: Failed to open file "{0}"\n'.format(args.file))
        return 1

    try:
        analyse(args)
    except WhenPresentError as err:
        sys.stderr.write("ERROR: {0}\n".format(err))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
