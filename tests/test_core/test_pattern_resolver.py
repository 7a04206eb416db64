# tests/test_core/test_pattern_resolver.py
"""Pattern Resolver Tests
========================

Unit tests for `alignany.core.PatternResolver`.

Verifies that:
1. Strings compile, and malformed regexes raise `InvalidPattern` with the
   engine's message.
2. Absent values prompt exactly once; cancelling returns None quietly.
3. Any other value raises `InvalidArgument` naming the received value.
"""

import re
from unittest.mock import MagicMock

import pytest

from alignany.core.Errors import InvalidArgument, InvalidPattern
from alignany.core.PatternResolver import (
    MISSING,
    InvalidSource,
    LiteralSource,
    PromptSource,
    classify_source,
    compile_pattern,
    resolve_pattern,
)


def test_classify_source_variants() -> None:
    """Strings, absent values and everything else map to the three variants."""
    assert classify_source(" = ") == LiteralSource(" = ")
    assert classify_source("") == LiteralSource("")
    assert classify_source(None) == PromptSource()
    assert classify_source(MISSING) == PromptSource()
    assert classify_source(42) == InvalidSource(42)
    assert classify_source(b" = ") == InvalidSource(b" = ")
    assert classify_source(False) == InvalidSource(False)


def test_literal_pattern_compiles_without_prompting() -> None:
    prompt = MagicMock()
    pattern = resolve_pattern(" = ", prompt)

    assert pattern is not None
    assert pattern.source == " = "
    assert pattern.search("a = b").start() == 1
    prompt.assert_not_called()


def test_malformed_literal_raises_invalid_pattern() -> None:
    """`foo(` is unbalanced; the message comes from the regex engine."""
    with pytest.raises(InvalidPattern) as excinfo:
        resolve_pattern("foo(", MagicMock())

    try:
        re.compile("foo(")
    except re.error as e:
        expected = str(e)
    assert str(excinfo.value) == expected
    assert excinfo.value.source == "foo("


def test_absent_pattern_prompts_once_and_compiles_answer() -> None:
    prompt = MagicMock(return_value=r"\s#")
    pattern = resolve_pattern(MISSING, prompt)

    prompt.assert_called_once_with()
    assert pattern is not None
    assert pattern.source == r"\s#"


def test_cancelled_prompt_returns_none() -> None:
    prompt = MagicMock(return_value=None)
    assert resolve_pattern(None, prompt) is None
    prompt.assert_called_once_with()


def test_prompted_malformed_pattern_raises() -> None:
    with pytest.raises(InvalidPattern):
        resolve_pattern(None, MagicMock(return_value="[unclosed"))


@pytest.mark.parametrize(
    "value, rendered",
    [
        (42, "42"),
        (["a", "b"], '["a", "b"]'),
        ({"pattern": " = "}, '{"pattern": " = "}'),
        (True, "true"),
    ],
)
def test_non_string_value_raises_invalid_argument(value, rendered) -> None:
    prompt = MagicMock()
    with pytest.raises(InvalidArgument) as excinfo:
        resolve_pattern(value, prompt)

    assert str(excinfo.value) == f"Expected a string arg but got: {rendered}"
    assert excinfo.value.value == value
    prompt.assert_not_called()


def test_invalid_argument_falls_back_to_repr() -> None:
    with pytest.raises(InvalidArgument) as excinfo:
        resolve_pattern(b"x", MagicMock())
    assert str(excinfo.value) == "Expected a string arg but got: b'x'"


def test_compile_pattern_keeps_source() -> None:
    pattern = compile_pattern(r"//|#")
    assert pattern.regex.pattern == r"//|#"
    assert pattern.source == r"//|#"
