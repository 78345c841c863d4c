"""Turn raw source lines into classified preprocessor directive events.

Only the conditional directives matter here.  The expression that follows
the keyword is never interpreted, it is carried through verbatim so that it
can be shown to the user.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple
from io import open


class DirectiveKind(Enum):
    IRRELEVANT = "irrelevant"
    OPEN = "open"
    BRANCH_SWITCH = "branch_switch"
    CLOSE = "close"


_KEYWORD_KINDS = {
    "if": DirectiveKind.OPEN,
    "ifdef": DirectiveKind.OPEN,
    "ifndef": DirectiveKind.OPEN,
    "elif": DirectiveKind.BRANCH_SWITCH,
    "else": DirectiveKind.BRANCH_SWITCH,
    "endif": DirectiveKind.CLOSE,
}

# Whitespace as the preprocessor sees it within a line.
# The keyword is a run of letters only, so "#if_FOO" is still an #if.
_DIRECTIVE_PATTERN = re.compile(r"[ \t\v\f]*#[ \t\v\f]*([A-Za-z]*)")


@dataclass(frozen=True)
class LogicalLine:
    text: str              # Physical lines joined with "\n", backslashes kept
    line_number: int       # 1-based number of the first physical line
    lines_consumed: int    # How many physical lines were joined


@dataclass(frozen=True)
class ScannedDirective:
    kind: DirectiveKind
    keyword: Optional[str]
    text: str
    line_number: int
    lines_consumed: int


def classify_keyword(keyword):
    """Map a directive keyword (case sensitive) to its DirectiveKind"""
    return _KEYWORD_KINDS.get(keyword, DirectiveKind.IRRELEVANT)


def parse_directive(text) -> Tuple[DirectiveKind, Optional[str]]:
    """Classify one logical line.

    Returns the kind and the directive keyword.  The keyword is None when
    the line is not a directive at all, or is a lone '#'.
    """
    match = _DIRECTIVE_PATTERN.match(text)
    if not match or not match.group(1):
        return DirectiveKind.IRRELEVANT, None
    keyword = match.group(1)
    return classify_keyword(keyword), keyword


def logical_lines(physical_lines: Iterable[str]) -> Iterator[LogicalLine]:
    """Join backslash continued lines.

    The line number reported is that of the first physical line of the join
    but the numbering of the following line skips all the consumed lines.
    """
    line_number = 1
    pending = None
    for line in physical_lines:
        if pending is None:
            pending = [line]
        else:
            pending.append(line)
        if line.endswith("\\"):
            continue
        yield LogicalLine("\n".join(pending), line_number, len(pending))
        line_number += len(pending)
        pending = None

    # The last line ended in a backslash with nothing left to join
    if pending is not None:
        yield LogicalLine("\n".join(pending), line_number, len(pending))


def scan(physical_lines: Iterable[str]) -> Iterator[ScannedDirective]:
    """Yield a ScannedDirective for every logical line, relevant or not"""
    for logical in logical_lines(physical_lines):
        kind, keyword = parse_directive(logical.text)
        yield ScannedDirective(
            kind=kind,
            keyword=keyword,
            text=logical.text,
            line_number=logical.line_number,
            lines_consumed=logical.lines_consumed,
        )


def read_lines(filename):
    """Yield the physical lines of the file without their line terminators"""
    with open(filename, encoding="utf-8", errors="ignore") as ff:
        for line in ff:
            yield line.rstrip("\n")
