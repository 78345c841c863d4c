import sys
import configargparse

from whenpresent.version import __version__
import whenpresent.configutils


def add_base_arguments(cap):
    cap.add(
        "-v",
        "--verbose",
        help="Output verbosity. Add more v's to make it more verbose",
        action="count",
        default=0)
    cap.add(
        "-q",
        "--quiet",
        help="Decrement verbosity. Useful in apps where the default verbosity > 0.",
        action="count",
        default=0)
    cap.add(
        "--version",
        action="version",
        version=__version__)
    cap.add(
        "-?",
        action='help',
        help='Help')


def create_parser(description, argv=None, include_config=True):
    """Create the configargparse singleton with the base arguments added.
    Values come from (highest priority first) the command line,
    WHEN_PRESENT_* environment variables, config files then defaults.
    """
    if include_config:
        config_files = whenpresent.configutils.config_files(argv=argv)
    else:
        config_files = []

    cap = configargparse.getArgumentParser(
        description=description,
        formatter_class=configargparse.ArgumentDefaultsHelpFormatter,
        auto_env_var_prefix="WHEN_PRESENT_",
        default_config_files=config_files,
        args_for_setting_config_path=["-c", "--config"],
        ignore_unknown_config_file_keys=True,
    )
    add_base_arguments(cap)
    return cap


def _strip_quotes(args):
    """Config files and environment variables often carry quoted values"""
    for name in vars(args):
        value = getattr(args, name)
        if isinstance(value, str):
            setattr(args, name, value.strip("\"'"))
        elif isinstance(value, list):
            setattr(
                args,
                name,
                [vv.strip("\"'") if isinstance(vv, str) else vv for vv in value])


def _commonsubstitutions(args):
    """Apply the adjustments that every app wants"""
    args.verbose -= args.quiet
    _strip_quotes(args)


def substitutions(args, verbose=None):
    _commonsubstitutions(args)

    if verbose is None:
        verbose = args.verbose
    if verbose >= 2:
        verbose_print_args(args)


def parseargs(cap, argv=None, verbose=None):
    args = cap.parse_args(args=argv)
    substitutions(args, verbose)
    return args


def verbose_print_args(args, file=None):
    """Print the args in two columns Attr: Value"""
    if file is None:
        file = sys.stdout
    print("\nFinal aggregated variables:", file=file)
    maxattrlen = max((len(attr) for attr in vars(args)), default=0)
    fmt = "".join(["{0:", str(maxattrlen + 1), "}: {1}"])
    for attr, value in sorted(vars(args).items()):
        print(fmt.format(attr, "" if value is None else value), file=file)
