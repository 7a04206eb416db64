# alignany/core/Host.py
"""Interfaces the alignment commands expect from their host environment.

The host owns the text buffer, the user interface and undo. The core only
reads lines and selections, asks for a pattern, reports errors, and hands
back one batch of insertions per command.
"""

from typing import Optional, Protocol, Sequence, runtime_checkable

from alignany.core.AlignmentPlanner import Insertion
from alignany.core.Selection import Selection


@runtime_checkable
class AlignmentDocument(Protocol):
    """The document an alignment command operates on."""

    @property
    def language_id(self) -> Optional[str]:
        ...

    def lines(self) -> Sequence[str]:
        ...

    def selections(self) -> Sequence[Selection]:
        ...

    def apply_insertions(self, batch: Sequence[Insertion]) -> bool:
        """Applies all insertions as one undoable edit.

        Insertions use pre-edit coordinates and touch distinct lines, so the
        host may apply them in any order. Returns False if the edit was
        refused, in which case nothing must have changed.
        """
        ...


@runtime_checkable
class AlignmentHost(Protocol):
    def active_document(self) -> Optional[AlignmentDocument]:
        ...

    def prompt_for_pattern(self) -> Optional[str]:
        """Asks the user for a regular expression; None means cancelled."""
        ...

    def report_error(self, message: str) -> None:
        ...
