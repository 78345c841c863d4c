"""Exceptions raised while analysing preprocessor conditionals."""


class WhenPresentError(Exception):
    """Base class for everything this package raises"""


class ConditionalStructureError(WhenPresentError, ValueError):
    """The #if/#elif/#else/#endif structure of the source is ill-formed.

    These are fatal. No part of a tree that raised one of these is queried.
    """

    message = "Ill-formed conditional structure"

    def __init__(self, line_number):
        self.line_number = line_number
        super().__init__(f"{self.message} (line {line_number})")


class UnmatchedBranchSwitch(ConditionalStructureError):
    message = "Encountered else outside of a conditional"


class UnmatchedClose(ConditionalStructureError):
    message = "Encountered '#endif' with no matching conditional"


class UnterminatedConditional(ConditionalStructureError):
    """line_number is the opening line of the innermost conditional left open"""

    message = "Reached end of file with an active conditional block"


class InvalidTargetLine(WhenPresentError, ValueError):
    def __init__(self, line, line_count):
        self.line = line
        self.line_count = line_count
        super().__init__(
            f"Invalid line number '{line}'. The file has {line_count} lines"
        )


class UnreadableSource(WhenPresentError):
    def __init__(self, filename, reason=None):
        self.filename = filename
        self.reason = reason
        message = f'Failed to open file "{filename}"'
        if reason:
            message += f". {reason}"
        super().__init__(message)
