# alignany/core/History.py
"""History Module
==============
This module provides the `History` class, which manages the undo and redo
stacks of a `Buffer`.

Key Features:
-------------
- Multi-level undo and redo of text insertions.
- Compound actions: everything recorded between `begin_compound_action()`
  and `end_compound_action()` is stored as one entry, so an alignment that
  pads many lines is undone with a single `undo()`.
- Consistency checks before reverting an insertion, with detailed logging
  when the buffer no longer holds the text that was inserted.

Action format:
--------------
- `{"type": "insert", "text": str, "position": (row, col)}`
- `{"type": "compound", "actions": [<insert action>, ...]}`
"""

import logging
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from alignany.core.Buffer import Buffer


## ==================== History Class (Undo/Redo) ====================
class History:
    """Undo/redo history for a buffer.

    Attributes:
        buffer (Buffer): The buffer this history manager is associated with.
        _action_history (list[dict[str, Any]]): Stack of performed actions for undo.
        _undone_actions (list[dict[str, Any]]): Stack of undone actions for redo.
        _compound_actions (list[dict[str, Any]] | None): Actions collected for
            the compound action in progress, or None outside of one.
        _saved_depth (int | None): Undo-stack depth matching the file on disk,
            or None once that state can no longer be reached by undo/redo.
    """

    def __init__(self, buffer: "Buffer") -> None:
        self.buffer = buffer
        self._action_history: list[dict[str, Any]] = []
        self._undone_actions: list[dict[str, Any]] = []
        self._compound_actions: list[dict[str, Any]] | None = None
        self._saved_depth: int | None = 0

    def mark_saved(self) -> None:
        """Records the current state as the one written to disk."""
        self._saved_depth = len(self._action_history)

    @property
    def can_undo(self) -> bool:
        return bool(self._action_history)

    @property
    def can_redo(self) -> bool:
        return bool(self._undone_actions)

    def begin_compound_action(self) -> None:
        """Starts a sequence of actions that should be undone/redone together."""
        if self._compound_actions is not None:
            logging.warning("History: Nested compound action, continuing the current one.")
            return
        self._compound_actions = []
        logging.debug("History: Beginning compound action.")

    def end_compound_action(self) -> None:
        """Ends the compound action and records it as a single history entry.

        An empty compound action records nothing.
        """
        actions = self._compound_actions
        self._compound_actions = None
        if actions is None:
            logging.warning("History: end_compound_action() without a matching begin.")
            return
        if not actions:
            logging.debug("History: Ended empty compound action, nothing recorded.")
            return

        self._push({"type": "compound", "actions": actions})
        logging.debug(
            f"History: Ended compound action with {len(actions)} action(s). "
            f"History size: {len(self._action_history)}"
        )

    def add_action(self, action: dict[str, Any]) -> None:
        """Adds a new action to the history."""
        if not isinstance(action, dict) or "type" not in action:
            logging.warning(f"History: Attempted to add invalid action: {action}")
            return

        if self._compound_actions is not None:
            self._compound_actions.append(action)
            return

        self._push(action)
        logging.debug(
            f"History: Action '{action['type']}' added. History size: {len(self._action_history)}"
        )

    def undo(self) -> bool:
        """Undoes the most recent entry.

        Returns:
            bool: True if the buffer changed, False if there was nothing to
            undo or the entry could not be reverted (it then stays on the
            undo stack).
        """
        if not self._action_history:
            logging.debug("History: Nothing to undo.")
            return False

        last_action = self._action_history.pop()
        try:
            self._revert(last_action)
        except (IndexError, ValueError) as e:
            logging.error(
                f"Undo: could not revert '{last_action.get('type')}': {e}", exc_info=True
            )
            self._action_history.append(last_action)
            return False

        self._undone_actions.append(last_action)
        self._sync_modified()
        logging.debug(f"History: Undid '{last_action['type']}'.")
        return True

    def redo(self) -> bool:
        """Re-applies the most recently undone entry.

        Returns:
            bool: True if the buffer changed, False otherwise.
        """
        if not self._undone_actions:
            logging.debug("History: Nothing to redo.")
            return False

        action = self._undone_actions.pop()
        try:
            self._reapply(action)
        except (IndexError, ValueError) as e:
            logging.error(
                f"Redo: could not reapply '{action.get('type')}': {e}", exc_info=True
            )
            self._undone_actions.append(action)
            return False

        self._action_history.append(action)
        self._sync_modified()
        logging.debug(f"History: Redid '{action['type']}'.")
        return True

    def _push(self, entry: dict[str, Any]) -> None:
        # A saved state on the discarded redo branch is gone for good.
        if self._saved_depth is not None and self._saved_depth > len(self._action_history):
            self._saved_depth = None
        self._action_history.append(entry)
        self._undone_actions.clear()

    def _sync_modified(self) -> None:
        self.buffer.modified = len(self._action_history) != self._saved_depth

    def _revert(self, action: dict[str, Any]) -> None:
        action_type = action.get("type")
        if action_type == "compound":
            for member in reversed(action["actions"]):
                self._revert(member)
        elif action_type == "insert":
            row, col = action["position"]
            inserted = action["text"]
            if not (0 <= row < len(self.buffer.text)):
                raise IndexError(
                    f"Undo insert: row {row} out of bounds (text len {len(self.buffer.text)})."
                )
            line = self.buffer.text[row]
            if line[col:col + len(inserted)] != inserted:
                raise ValueError(
                    f"Undo insert: expected {inserted!r} at [{row},{col}], "
                    f"found {line[col:col + len(inserted)]!r}."
                )
            self.buffer.text[row] = line[:col] + line[col + len(inserted):]
        else:
            raise ValueError(f"Unknown action type '{action_type}'.")

    def _reapply(self, action: dict[str, Any]) -> None:
        action_type = action.get("type")
        if action_type == "compound":
            for member in action["actions"]:
                self._reapply(member)
        elif action_type == "insert":
            row, col = action["position"]
            self.buffer.insert_text_at_position(action["text"], row, col)
        else:
            raise ValueError(f"Unknown action type '{action_type}'.")
