# alignany/core/Errors.py
"""Errors Module
=============
Exception hierarchy for the alignment commands.

Every failure raised while resolving a pattern, normalizing selections,
locating matches or applying edits derives from `AlignmentError`. The
command surface (`Aligner`) catches this base class, logs it and forwards
`str(error)` to the host's error reporter, so the message of each exception
is exactly the text shown to the user.

Cancelling the pattern prompt is not an error and has no exception here.
"""

from typing import Any


class AlignmentError(Exception):
    """Base class for all user-facing alignment failures."""


class InvalidPattern(AlignmentError):
    """The supplied or prompted string is not a valid regular expression."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(message)
        self.source = source


class InvalidArgument(AlignmentError):
    """A pattern source that is neither a string nor absent was supplied."""

    def __init__(self, value: Any, rendered: str) -> None:
        super().__init__(f"Expected a string arg but got: {rendered}")
        self.value = value


class NoActiveDocument(AlignmentError):
    def __init__(self) -> None:
        super().__init__("No editor")


class InsufficientLines(AlignmentError):
    """Whole-document mode on a document with fewer than two lines."""

    def __init__(self, line_count: int) -> None:
        super().__init__("Document should have multiple lines")
        self.line_count = line_count


class DuplicateLineSelection(AlignmentError):
    """Two selections claim the same line.

    Attributes:
        line_number: The offending line, 1-based as shown to the user.
    """

    def __init__(self, line_number: int) -> None:
        super().__init__(
            f"Only 1 selection per line is allowed (line {line_number})"
        )
        self.line_number = line_number


class InsufficientSelection(AlignmentError):
    def __init__(self, claimed: int) -> None:
        super().__init__("Multiple lines must be selected")
        self.claimed = claimed


class NoMatchesFound(AlignmentError):
    def __init__(self, pattern_source: str) -> None:
        super().__init__(f"No matches found for pattern /{pattern_source}/")
        self.pattern_source = pattern_source


class SingleMatchFound(AlignmentError):
    def __init__(self, pattern_source: str) -> None:
        super().__init__(f"Only 1 match found for pattern /{pattern_source}/")
        self.pattern_source = pattern_source


class EditRejected(AlignmentError):
    """The host refused to apply the batch of insertions."""

    def __init__(self, insertion_count: int) -> None:
        super().__init__(
            f"Could not apply {insertion_count} alignment edit(s) to the document"
        )
        self.insertion_count = insertion_count
