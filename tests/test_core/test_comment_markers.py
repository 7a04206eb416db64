# tests/test_core/test_comment_markers.py
"""Comment-Marker Table Tests
===========================

Unit tests for `alignany.core.CommentMarkers`: the static table, the generic
fallback, Pygments lexer mapping and configured overrides.
"""

import re

import pytest
from pygments.lexers import TextLexer, get_lexer_by_name

from alignany.core.CommentMarkers import (
    COMMENT_PATTERNS,
    FALLBACK_COMMENT_PATTERN,
    CommentMarkers,
    language_id_for_lexer,
)


@pytest.mark.parametrize(
    "language_id, pattern",
    [
        ("python", "#"),
        ("html", "<!--"),
        ("sql", r"--|/\*"),
        ("latex", "%"),
        ("ini", ";"),
        ("fsharp", "//"),
        ("bat", "@[rR][eE][mM]"),
        ("css", r"/\*"),
        ("clojure", ";;"),
        ("ocaml", r"\(\*"),
        ("vb", "'"),
    ],
)
def test_known_languages(language_id: str, pattern: str) -> None:
    assert CommentMarkers().pattern_for(language_id) == pattern


def test_unknown_language_uses_fallback() -> None:
    assert CommentMarkers().pattern_for("javascript") == FALLBACK_COMMENT_PATTERN
    assert CommentMarkers().pattern_for(None) == FALLBACK_COMMENT_PATTERN


def test_fallback_matches_line_or_block_opener() -> None:
    fallback = re.compile(FALLBACK_COMMENT_PATTERN)
    assert fallback.search("int a = 1; // one").start() == 11
    assert fallback.search("x = a * b; /* c */").start() == 11
    assert fallback.search("x = a / b") is None


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        COMMENT_PATTERNS["python"] = "//"  # type: ignore[index]


def test_every_table_pattern_compiles() -> None:
    for pattern in COMMENT_PATTERNS.values():
        re.compile(pattern)


def test_batch_pattern_is_case_insensitive_keyword() -> None:
    regex = re.compile(COMMENT_PATTERNS["bat"])
    assert regex.search("set A=1 @Rem note").start() == 8


@pytest.mark.parametrize(
    "lexer_name, language_id",
    [
        ("python", "python"),
        ("bash", "shellscript"),
        ("docker", "dockerfile"),
        ("make", "makefile"),
        ("batch", "bat"),
        ("rst", "restructuredtext"),
        ("css", "css"),
        ("tex", "tex"),
    ],
)
def test_language_id_for_lexer(lexer_name: str, language_id: str) -> None:
    assert language_id_for_lexer(get_lexer_by_name(lexer_name)) == language_id


def test_language_id_for_plain_text_is_none() -> None:
    assert language_id_for_lexer(TextLexer()) is None


def test_overrides_extend_and_replace_without_touching_table() -> None:
    markers = CommentMarkers({"zig": "//", "python": r"#+", "bogus": 3})

    assert markers.pattern_for("zig") == "//"
    assert markers.pattern_for("python") == r"#+"
    assert markers.pattern_for("bogus") == FALLBACK_COMMENT_PATTERN
    assert COMMENT_PATTERNS["python"] == "#"
    assert "zig" not in COMMENT_PATTERNS


def test_custom_fallback() -> None:
    markers = CommentMarkers(fallback="//")
    assert markers.pattern_for("javascript") == "//"
    assert markers.pattern_for(None) == "//"


def test_non_mapping_overrides_are_ignored() -> None:
    markers = CommentMarkers("oops")  # type: ignore[arg-type]
    assert markers.pattern_for("python") == "#"
    assert dict(markers.patterns) == dict(COMMENT_PATTERNS)
