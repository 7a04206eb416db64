# tests/test_core/test_edit_emitter.py
"""Edit Emitter Tests
====================

Checks that a plan reaches the document as exactly one batch, that no-op
plans leave the document alone, and that a refused batch raises.
"""

from unittest.mock import MagicMock

import pytest

from alignany.core.AlignmentPlanner import AlignmentPlan, Insertion
from alignany.core.EditEmitter import EditEmitter
from alignany.core.Errors import EditRejected


def test_emits_single_batch() -> None:
    document = MagicMock()
    document.apply_insertions.return_value = True
    plan = AlignmentPlan(4, (Insertion(0, 1, "   "), Insertion(2, 3, " ")), 3)

    assert EditEmitter(document).emit(plan) == 2
    document.apply_insertions.assert_called_once_with(
        [Insertion(0, 1, "   "), Insertion(2, 3, " ")]
    )


def test_noop_plan_does_not_touch_document() -> None:
    document = MagicMock()
    assert EditEmitter(document).emit(AlignmentPlan(5, (), 2)) == 0
    document.apply_insertions.assert_not_called()


def test_rejected_batch_raises() -> None:
    document = MagicMock()
    document.apply_insertions.return_value = False
    plan = AlignmentPlan(2, (Insertion(1, 0, "  "),), 2)

    with pytest.raises(EditRejected) as excinfo:
        EditEmitter(document).emit(plan)
    assert excinfo.value.insertion_count == 1
    assert str(excinfo.value) == "Could not apply 1 alignment edit(s) to the document"
