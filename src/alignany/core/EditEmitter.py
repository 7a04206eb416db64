# alignany/core/EditEmitter.py
"""Hands an `AlignmentPlan` to the host document as a single edit batch."""

import logging
from typing import TYPE_CHECKING

from alignany.core.AlignmentPlanner import AlignmentPlan
from alignany.core.Errors import EditRejected


if TYPE_CHECKING:
    from alignany.core.Host import AlignmentDocument


class EditEmitter:
    """Applies planned insertions to one document.

    The whole plan goes to `apply_insertions` in one call so that the host
    records it as one undo step. A plan without insertions (everything
    already aligned) does not touch the document at all.
    """

    def __init__(self, document: "AlignmentDocument") -> None:
        self.document = document

    def emit(self, plan: AlignmentPlan) -> int:
        """Applies `plan` and returns the number of insertions made.

        Raises:
            EditRejected: The document refused the batch.
        """
        if plan.is_noop:
            logging.debug("EditEmitter: lines already aligned, nothing to insert.")
            return 0

        batch = list(plan.insertions)
        if not self.document.apply_insertions(batch):
            raise EditRejected(len(batch))

        logging.debug(
            f"EditEmitter: applied {len(batch)} insertion(s), aligned to column {plan.column}."
        )
        return len(batch)
