# tests/test_core/test_alignment_planner.py
"""Alignment Planner Tests
=========================

Unit tests for `plan_alignment`.
"""

import pytest

from alignany.core.AlignmentPlanner import Insertion, plan_alignment
from alignany.core.Errors import NoMatchesFound, SingleMatchFound
from alignany.core.MatchLocator import MatchPosition, MatchScan
from alignany.core.PatternResolver import compile_pattern


def _scan(*positions: MatchPosition) -> MatchScan:
    max_column = max((p.column for p in positions), default=-1)
    return MatchScan(tuple(positions), max_column, tuple(p.line for p in positions))


def test_pads_every_match_left_of_the_maximum() -> None:
    scan = _scan(MatchPosition(3, 1), MatchPosition(0, 4), MatchPosition(1, 2))
    plan = plan_alignment(scan, compile_pattern(" = "))

    assert plan.column == 4
    assert plan.match_count == 3
    assert plan.insertions == (
        Insertion(1, 2, "  "),
        Insertion(3, 1, "   "),
    )


def test_already_aligned_plan_is_noop() -> None:
    plan = plan_alignment(
        _scan(MatchPosition(0, 6), MatchPosition(1, 6)), compile_pattern("#")
    )
    assert plan.is_noop
    assert plan.column == 6


def test_no_matches() -> None:
    with pytest.raises(NoMatchesFound) as excinfo:
        plan_alignment(_scan(), compile_pattern(" = "))
    assert str(excinfo.value) == "No matches found for pattern / = /"


def test_single_match() -> None:
    with pytest.raises(SingleMatchFound) as excinfo:
        plan_alignment(_scan(MatchPosition(2, 3)), compile_pattern(r"foo\("))
    assert str(excinfo.value) == r"Only 1 match found for pattern /foo\(/"
