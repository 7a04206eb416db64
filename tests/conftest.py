# tests/conftest.py
"""Pytest configuration with shared fixtures for the alignany tests.

Tooling: pytest, unittest.mock
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Iterator, Optional, Sequence

import pytest

from alignany.core.Buffer import Buffer
from alignany.core.Selection import Selection
from tests.stubs import StubDocument, StubHost


# --- Logging isolation ---
@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Undo any `setup_logging` call made by a test.

    `setup_logging` replaces the root logger's handlers; the originals (among
    them pytest's capture handlers) are put back and the added ones closed.
    """
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


# --- Configuration ---
@pytest.fixture
def quiet_config() -> dict[str, dict[str, Any]]:
    """Provide a configuration that keeps logging away from the filesystem.

    Returns:
        dict[str, dict[str, Any]]: Configuration dictionary.
    """
    return {
        "logging": {"log_to_file": False, "log_to_console": False},
        "alignment": {},
        "comment_patterns": {},
    }


@pytest.fixture
def quiet_config_file(tmp_path: Path) -> Path:
    """Write a config.toml that disables file and console logging.

    Returns:
        Path: Path to the config file.
    """
    path = tmp_path / "config.toml"
    path.write_text(
        "[logging]\nlog_to_file = false\nlog_to_console = false\n",
        encoding="utf-8",
    )
    return path


# --- Host fixtures ---
@pytest.fixture
def make_host() -> Callable[..., StubHost]:
    """Factory building a `StubHost` around a `StubDocument`.

    Returns:
        Callable: ``make_host(lines, selections=None, language_id=None,
        prompt_answers=None, accept_edits=True)``.
    """

    def _make(
        lines: Sequence[str],
        selections: Optional[Sequence[Selection]] = None,
        language_id: Optional[str] = None,
        prompt_answers: Optional[Sequence[Optional[str]]] = None,
        accept_edits: bool = True,
    ) -> StubHost:
        document = StubDocument(
            lines, selections, language_id=language_id, accept_edits=accept_edits
        )
        return StubHost(document, prompt_answers)

    return _make


# --- Buffer fixtures ---
@pytest.fixture
def sample_lines() -> list[str]:
    """Provide a small block of assignments with trailing comments.

    Returns:
        list[str]: Code lines for use in tests.
    """
    return [
        "x = 1  # one",
        "longer_name = 2  # two",
        "",
        "mid = 3 # three",
    ]


@pytest.fixture
def sample_buffer(sample_lines: list[str]) -> Buffer:
    """Provide a `Buffer` preloaded with `sample_lines` as Python source.

    Returns:
        Buffer: The buffer with a single cursor at the top.
    """
    return Buffer(sample_lines, filename="sample.py", language_id="python")

