# alignany/core/SelectionNormalizer.py
"""SelectionNormalizer Module
==========================
Turns the host's selection state into the canonical list of `LineRange`
objects that the match locator scans.

Rules:
------
- A single bare cursor (and nothing else) means "the whole document". The
  document must have at least two lines.
- Otherwise every selection claims lines: a cursor claims the line it sits
  on (searched in full), a span claims every line from its start line to its
  end line (searched within the span's columns).
- A line may be claimed only once per operation; the first duplicate aborts
  with `DuplicateLineSelection`.
- At least two distinct lines must be claimed in total.

One `LineRange` is produced per selection, not per line, so the column
limits of a span survive normalization while the claimed-line set enforces
the one-range-per-line invariant.
"""

import logging
from typing import Sequence

from alignany.core.Errors import (
    DuplicateLineSelection,
    InsufficientLines,
    InsufficientSelection,
)
from alignany.core.Selection import LineRange, Selection


def normalize_selections(
    selections: Sequence[Selection], line_count: int
) -> list[LineRange]:
    """Resolves selections into non-overlapping line ranges.

    Args:
        selections: The host's selections in host order.
        line_count: Number of lines in the document.

    Returns:
        The line ranges to scan, one per selection (or a single range
        covering the document in whole-document mode).

    Raises:
        InsufficientLines: Whole-document mode on a document shorter than 2 lines.
        DuplicateLineSelection: Two selections share a line.
        InsufficientSelection: Fewer than 2 distinct lines were claimed.
    """
    if len(selections) == 1 and selections[0].is_empty:
        if line_count < 2:
            raise InsufficientLines(line_count)
        logging.debug(
            f"SelectionNormalizer: single cursor, scanning all {line_count} lines."
        )
        return [LineRange(0, 0, line_count - 1, None)]

    claimed: set[int] = set()
    ranges: list[LineRange] = []

    for selection in selections:
        if selection.is_empty:
            line_range = LineRange.full_line(selection.start.line)
        else:
            line_range = LineRange.from_selection(selection)

        for line in line_range.line_indices():
            if line in claimed:
                raise DuplicateLineSelection(line + 1)
            claimed.add(line)
        ranges.append(line_range)

    if len(claimed) < 2:
        raise InsufficientSelection(len(claimed))

    logging.debug(
        f"SelectionNormalizer: {len(selections)} selection(s) claimed "
        f"{len(claimed)} line(s)."
    )
    return ranges

