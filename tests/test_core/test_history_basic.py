# tests/test_core/test_history_basic.py
"""History Basic Tests
========================

Unit tests for the History class (basic functionality).

This test module verifies that the History class:

1. Correctly records individual actions.
2. Supports compound actions through `begin_compound_action` and `end_compound_action`.
3. Clears the redo stack (`_undone_actions`) whenever new actions are added,
   ensuring consistent undo/redo behavior.
"""

from types import SimpleNamespace

from alignany.core.History import History


def make_stub_buffer():
    """Return a minimal stub buffer object.

    The stub provides only the attributes required by History,
    without implementing any buffer-specific logic.
    """
    return SimpleNamespace(text=[""], modified=False)


def test_add_actions():
    """Test: Adding actions to the history.

    Verifies that:
    - Actions are appended to `_action_history`.
    - The redo stack (`_undone_actions`) is empty after adding actions.
    """
    h = History(make_stub_buffer())  # type: ignore[arg-type]

    action1 = {"type": "insert", "text": "hello", "position": (0, 0)}
    action2 = {"type": "insert", "text": " ", "position": (0, 1)}

    h.add_action(action1)
    h.add_action(action2)

    assert h._action_history == [action1, action2]
    assert h._undone_actions == []
    assert h.can_undo and not h.can_redo


def test_invalid_action_is_ignored():
    h = History(make_stub_buffer())  # type: ignore[arg-type]
    h.add_action({"text": "no type"})
    h.add_action("insert")  # type: ignore[arg-type]
    assert h._action_history == []


def test_compound_action_is_one_entry():
    """Test: Actions between begin/end are stored as a single compound entry.

    Verifies that:
    - Members are grouped in one `compound` record, in order.
    - The redo stack (`_undone_actions`) is cleared after a compound action ends.
    - Adding a new action after ending a compound action also clears the redo stack.
    """
    h = History(make_stub_buffer())  # type: ignore[arg-type]
    h._undone_actions.append({"type": "insert", "text": "Z", "position": (0, 0)})

    h.begin_compound_action()
    h.add_action({"type": "insert", "text": "A", "position": (0, 0)})
    h.add_action({"type": "insert", "text": "B", "position": (1, 0)})
    h.end_compound_action()

    assert len(h._action_history) == 1
    entry = h._action_history[0]
    assert entry["type"] == "compound"
    assert [a["text"] for a in entry["actions"]] == ["A", "B"]
    assert h._undone_actions == []

    h.add_action({"type": "insert", "text": "C", "position": (0, 2)})
    assert len(h._action_history) == 2
    assert h._undone_actions == []


def test_empty_compound_action_records_nothing():
    h = History(make_stub_buffer())  # type: ignore[arg-type]
    redo_entry = {"type": "insert", "text": "Z", "position": (0, 0)}
    h._undone_actions.append(redo_entry)

    h.begin_compound_action()
    h.end_compound_action()

    assert h._action_history == []
    assert h._undone_actions == [redo_entry]


def test_nested_begin_continues_current_compound():
    h = History(make_stub_buffer())  # type: ignore[arg-type]

    h.begin_compound_action()
    h.add_action({"type": "insert", "text": "A", "position": (0, 0)})
    h.begin_compound_action()
    h.add_action({"type": "insert", "text": "B", "position": (0, 1)})
    h.end_compound_action()

    assert len(h._action_history) == 1
    assert len(h._action_history[0]["actions"]) == 2

