"""Build the tree of #if...#endif groups found in a source file.

The tree is built in a single forward pass.  Nesting comes purely from the
order of the directives (a stack of open conditionals), never from line
numbers or indentation.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import whenpresent.directives
from whenpresent.directives import DirectiveKind
from whenpresent.errors import (
    InvalidTargetLine,
    UnmatchedBranchSwitch,
    UnmatchedClose,
    UnterminatedConditional,
)


@dataclass
class ConditionalBlock:
    """One branch of a conditional.  E.g. the lines from an '#elif' up to
    the next '#elif', '#else' or '#endif' at the same nesting level.
    """
    begin_line: int
    condition_text: str
    end_line: Optional[int] = None
    nested_conditionals: List["Conditional"] = field(default_factory=list)

    def contains(self, line):
        """The half open span [begin_line, end_line)"""
        return self.begin_line <= line < self.end_line


@dataclass
class Conditional:
    """The whole of an '#if', '#ifdef' or '#ifndef' through to its '#endif'"""
    begin_line: int
    end_line: Optional[int] = None
    blocks: List[ConditionalBlock] = field(default_factory=list)

    def contains(self, line):
        """The closed span [begin_line, end_line].  The '#endif' belongs here."""
        return self.begin_line <= line <= self.end_line


class ConditionalTree:
    """The completed, well formed result of a build.  Read only."""

    def __init__(self, conditionals, line_count):
        self.conditionals = tuple(conditionals)
        self.line_count = line_count

    def walk(self):
        """Yield (depth, conditional) depth first in source order"""
        stack = [(0, cond) for cond in reversed(self.conditionals)]
        while stack:
            depth, cond = stack.pop()
            yield depth, cond
            for block in reversed(cond.blocks):
                for nested in reversed(block.nested_conditionals):
                    stack.append((depth + 1, nested))

    def __len__(self):
        return sum(1 for _ in self.walk())


class ConditionalTreeBuilder:
    """Consume ScannedDirectives one at a time and assemble the tree"""

    def __init__(self, verbose=0):
        self.verbose = verbose
        self.conditionals = []
        self.line_count = 0
        # The currently open conditionals, innermost last
        self._open = []

    def feed(self, directive):
        self.line_count = directive.line_number + directive.lines_consumed - 1
        if directive.kind is DirectiveKind.OPEN:
            self._open_conditional(directive)
        elif directive.kind is DirectiveKind.BRANCH_SWITCH:
            self._switch_branch(directive)
        elif directive.kind is DirectiveKind.CLOSE:
            self._close_conditional(directive)
        elif directive.kind is DirectiveKind.IRRELEVANT:
            return
        else:
            raise ValueError(f"Unhandled directive kind {directive.kind!r}")

        if self.verbose >= 3:
            print(
                f"{directive.line_number:5d} {directive.kind.value:<13} "
                f"depth={len(self._open)} {directive.text.strip()}"
            )

    def _open_conditional(self, directive):
        cond = Conditional(begin_line=directive.line_number)
        cond.blocks.append(
            ConditionalBlock(
                begin_line=directive.line_number, condition_text=directive.text
            )
        )
        if self._open:
            self._open[-1].blocks[-1].nested_conditionals.append(cond)
        else:
            self.conditionals.append(cond)
        self._open.append(cond)

    def _switch_branch(self, directive):
        if not self._open:
            raise UnmatchedBranchSwitch(directive.line_number)
        cond = self._open[-1]
        cond.blocks[-1].end_line = directive.line_number
        cond.blocks.append(
            ConditionalBlock(
                begin_line=directive.line_number, condition_text=directive.text
            )
        )

    def _close_conditional(self, directive):
        if not self._open:
            raise UnmatchedClose(directive.line_number)
        cond = self._open.pop()
        cond.blocks[-1].end_line = directive.line_number
        cond.end_line = directive.line_number

    def finish(self):
        """Check that everything was closed and hand back the tree"""
        if self._open:
            raise UnterminatedConditional(self._open[-1].begin_line)
        return ConditionalTree(self.conditionals, self.line_count)


def build_tree(physical_lines: Iterable[str], verbose=0) -> ConditionalTree:
    """Scan the lines and build the conditional tree in one pass"""
    builder = ConditionalTreeBuilder(verbose=verbose)
    for directive in whenpresent.directives.scan(physical_lines):
        builder.feed(directive)
    return builder.finish()


def check_target_lines(lines, line_count):
    """Reject target lines that are not within 1..line_count"""
    for line in lines:
        if line <= 0 or line > line_count:
            raise InvalidTargetLine(line, line_count)
