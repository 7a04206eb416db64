# alignany/core/MatchLocator.py
"""MatchLocator Module
===================
Finds where the alignment pattern first occurs on every scanned line.

Each `LineRange` limits the searchable part of its lines (see
`LineRange.bounds_for`). The pattern is searched inside that slice only and
the slice-local offset is converted back to a full-line column before it is
recorded. Lines without a match are skipped; they neither block the
alignment of other lines nor receive padding.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from alignany.core.PatternResolver import Pattern
from alignany.core.Selection import LineRange


@dataclass(frozen=True)
class MatchPosition:
    """Full-line column where a line's first match begins."""

    line: int
    column: int


@dataclass(frozen=True)
class MatchScan:
    """Result of scanning a set of line ranges.

    Attributes:
        positions: One entry per matching line, in scan order.
        max_column: The rightmost match column, or -1 if nothing matched.
        scanned_lines: Every line index that was searched, in scan order.
    """

    positions: tuple[MatchPosition, ...]
    max_column: int
    scanned_lines: tuple[int, ...]


def locate_matches(
    lines: Sequence[str], ranges: Sequence[LineRange], pattern: Pattern
) -> MatchScan:
    """Searches every line covered by `ranges` for the first match of `pattern`.

    Args:
        lines: Full document lines.
        ranges: Normalized line ranges (no line appears twice).
        pattern: The compiled alignment pattern.

    Returns:
        A `MatchScan` with the match positions and their maximum column.
    """
    positions: list[MatchPosition] = []
    scanned: list[int] = []
    rightmost = -1

    for line_range in ranges:
        for line in line_range.line_indices():
            if not (0 <= line < len(lines)):
                logging.warning(
                    f"MatchLocator: line {line} outside document of {len(lines)} lines, skipped."
                )
                continue
            scanned.append(line)
            text = lines[line]
            begin, end = line_range.bounds_for(line, text)

            match = pattern.search(text[begin:end])
            if match is None:
                continue

            column = begin + match.start()
            rightmost = max(rightmost, column)
            positions.append(MatchPosition(line, column))

    logging.debug(
        f"MatchLocator: {len(positions)} match(es) for /{pattern.source}/ in "
        f"{len(scanned)} line(s), rightmost column {rightmost}."
    )
    return MatchScan(tuple(positions), rightmost, tuple(scanned))
