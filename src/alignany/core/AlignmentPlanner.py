# alignany/core/AlignmentPlanner.py
"""AlignmentPlanner Module
=======================
Computes the padding that moves every first match to the rightmost match
column M.

For a match at column C the plan inserts `M - C` spaces at (line, C), that
is, immediately before the match. Matches already at M get no insertion.
Alignment needs at least two reference points: zero or one match is an
error.
"""

import logging
from dataclasses import dataclass

from alignany.core.Errors import NoMatchesFound, SingleMatchFound
from alignany.core.MatchLocator import MatchScan
from alignany.core.PatternResolver import Pattern


@dataclass(frozen=True)
class Insertion:
    """Insert `text` before column `column` of line `line` (pre-edit coordinates)."""

    line: int
    column: int
    text: str


@dataclass(frozen=True)
class AlignmentPlan:
    """Padding needed to align all matches.

    Attributes:
        column: Target column M every match is moved to.
        insertions: One insertion per line that needs padding, sorted by line.
        match_count: Number of lines whose match took part in the alignment.
    """

    column: int
    insertions: tuple[Insertion, ...]
    match_count: int

    @property
    def is_noop(self) -> bool:
        return not self.insertions


def plan_alignment(scan: MatchScan, pattern: Pattern) -> AlignmentPlan:
    """Builds the insertion plan for a match scan.

    Args:
        scan: Output of `locate_matches`.
        pattern: The pattern that produced the scan, for diagnostics.

    Raises:
        NoMatchesFound: No line matched.
        SingleMatchFound: Exactly one line matched.
    """
    if not scan.positions:
        raise NoMatchesFound(pattern.source)
    if len(scan.positions) == 1:
        raise SingleMatchFound(pattern.source)

    target = scan.max_column
    insertions = [
        Insertion(position.line, position.column, " " * (target - position.column))
        for position in scan.positions
        if position.column < target
    ]
    insertions.sort(key=lambda insertion: insertion.line)

    logging.debug(
        f"AlignmentPlanner: target column {target}, {len(insertions)} of "
        f"{len(scan.positions)} line(s) need padding."
    )
    return AlignmentPlan(target, tuple(insertions), len(scan.positions))
