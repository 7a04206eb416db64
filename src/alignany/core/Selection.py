# alignany/core/Selection.py
"""Selection geometry shared by the alignment pipeline.

`Position` and `Selection` describe what the host hands over (cursors and
spans), `LineRange` is the canonical "portion of the document eligible for
matching" produced by the selection normalizer.

All coordinates are 0-based. Columns count characters of the raw line text;
tabs are not expanded.
"""

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(frozen=True, order=True)
class Position:
    """A (line, column) location inside a document."""

    line: int
    column: int


@dataclass(frozen=True)
class Selection:
    """A normalized selection: `start` is never after `end`.

    A selection whose start equals its end is a bare cursor ("point");
    anything else is a "span". Use `Selection.between` when the two ends come
    from an anchor/active pair that may be reversed.
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(
                f"Selection end {self.end} lies before its start {self.start}"
            )

    @classmethod
    def between(cls, anchor: Position, active: Position) -> "Selection":
        """Builds a selection from two ends given in any order."""
        if active < anchor:
            return cls(active, anchor)
        return cls(anchor, active)

    @classmethod
    def cursor(cls, line: int, column: int = 0) -> "Selection":
        point = Position(line, column)
        return cls(point, point)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True)
class LineRange:
    """The part of one or more consecutive lines that may be searched.

    A LineRange keeps the exact start/end columns of the selection it came
    from: the first line is searched from `start_column`, the last line up to
    `end_column`, and interior lines in full. `end_column=None` stands for
    "to the end of the line".

    Attributes:
        start_line: First line index covered (inclusive).
        start_column: Column where searching starts on `start_line`.
        end_line: Last line index covered (inclusive).
        end_column: Column where searching stops on `end_line`, or None.
    """

    start_line: int
    start_column: int
    end_line: int
    end_column: Optional[int] = None

    @classmethod
    def full_line(cls, line: int) -> "LineRange":
        return cls(line, 0, line, None)

    @classmethod
    def from_selection(cls, selection: Selection) -> "LineRange":
        return cls(
            selection.start.line,
            selection.start.column,
            selection.end.line,
            selection.end.column,
        )

    def line_indices(self) -> Iterator[int]:
        """Yields every line index covered by this range, in order."""
        return iter(range(self.start_line, self.end_line + 1))

    def bounds_for(self, line: int, text: str) -> tuple[int, int]:
        """Returns the `(begin, end)` slice of `text` permitted on `line`.

        Args:
            line: A line index inside this range.
            text: The full text of that line.

        Returns:
            Character offsets into `text`; `begin` is also the offset that
            converts a slice-local match column back to a full-line column.
        """
        line_end = len(text)
        stop = line_end if self.end_column is None else min(self.end_column, line_end)

        if self.start_line == self.end_line:
            begin = min(self.start_column, line_end)
            return begin, max(begin, stop)
        if line == self.start_line:
            return min(self.start_column, line_end), line_end
        if line == self.end_line:
            return 0, stop
        return 0, line_end
