"""Work out which conditions must hold for a line to be compiled.

Only line containment is measured.  The condition text is never evaluated.
"""

from dataclasses import dataclass
from enum import Enum

from whenpresent.conditionals import check_target_lines


class Requirement(Enum):
    TRUE = "TRUE"
    FALSE = "FALSE"


@dataclass(frozen=True)
class RequirementEntry:
    kind: Requirement
    anchor_line: int        # Line of the '#if', '#elif', etc. being required
    condition_text: str
    depth: int = 0          # 0 for the outermost conditional


def requirements_for_line(line, conditionals, depth=0):
    """Return the RequirementEntry list for line, outermost first.

    Earlier branches that must have been skipped come out as FALSE ahead of
    the TRUE for the branch containing the line, and the requirements of any
    nested conditionals follow their parent's TRUE.
    """
    result = []
    while conditionals:
        # Siblings never overlap so at most one conditional can hold the line
        cond = next((cc for cc in conditionals if cc.contains(line)), None)
        if cond is None:
            break

        conditionals = ()
        for block in cond.blocks:
            if block.contains(line):
                result.append(
                    RequirementEntry(
                        Requirement.TRUE, block.begin_line, block.condition_text, depth
                    )
                )
                # Later branches cannot affect this line
                conditionals = block.nested_conditionals
                depth += 1
                break
            result.append(
                RequirementEntry(
                    Requirement.FALSE, block.begin_line, block.condition_text, depth
                )
            )

    return result


def resolve_lines(tree, lines):
    """Return [(line, requirements), ...] in the order the lines were given.

    Every line is checked against the size of the file before any of them
    are resolved.
    """
    check_target_lines(lines, tree.line_count)
    return [(line, requirements_for_line(line, tree.conditionals)) for line in lines]
