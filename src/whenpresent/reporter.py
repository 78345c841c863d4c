"""Render requirement lists and conditional trees for people to read"""

import sys

from whenpresent.resolver import Requirement

STYLES = ("text", "indent")


def _entry_line(entry):
    if entry.kind is Requirement.TRUE:
        return f"REQUIRES TRUE ({entry.anchor_line:4d}):  {entry.condition_text}"
    return f"REQUIRES FALSE ({entry.anchor_line:4d}): {entry.condition_text}"


def format_requirements(line, entries, style="text"):
    """Return the report for one target line as a list of output lines.

    An empty entries list means the line is always present.
    """
    if style not in STYLES:
        raise ValueError(f"Unknown style {style!r}. Must be one of {STYLES}")

    output = [f"Requirements for line {line} being included in the translation unit:"]
    for entry in entries:
        indent = "  " * entry.depth if style == "indent" else ""
        output.append(indent + _entry_line(entry))
    output.append("")
    return output


def report(results, style="text", file=None):
    """Print the output of resolver.resolve_lines"""
    if file is None:
        file = sys.stdout
    for line, entries in results:
        for outline in format_requirements(line, entries, style):
            print(outline, file=file)


def describe_tree(tree):
    """One line per conditional and per branch, indented by nesting depth.
    Intended for debugging output.
    """
    output = []
    for depth, cond in tree.walk():
        indent = "  " * (2 * depth)
        output.append(f"{indent}[{cond.begin_line}, {cond.end_line}]")
        for block in cond.blocks:
            text = " ".join(block.condition_text.split())
            output.append(f"{indent}  [{block.begin_line}, {block.end_line}) {text}")
    return output
