# alignany/core/PatternResolver.py
"""PatternResolver Module
======================
Turns a pattern source into a compiled `Pattern`, or a failure.

A raw pattern value arrives from one of three places: another command
(always a string), a configuration file (anything the TOML parser can
produce) or the command palette/CLI with no argument at all. Raw values are
first classified into a tagged variant:

- `LiteralSource`: a string, compiled as a regular expression.
- `PromptSource`: no value; the user is asked once through a prompt
  callable. Declining the prompt cancels the operation quietly.
- `InvalidSource`: anything else; this is a caller contract violation.

Patterns use Python's `re` syntax and are searched, not matched, so an
unanchored pattern finds its first occurrence anywhere in the permitted part
of a line.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from alignany.core.Errors import InvalidArgument, InvalidPattern


class _Missing:
    """Sentinel type for "no pattern argument was supplied"."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

PromptFunc = Callable[[], Optional[str]]


@dataclass(frozen=True)
class Pattern:
    """A compiled alignment pattern together with the text it came from."""

    regex: "re.Pattern[str]"
    source: str

    def search(self, text: str) -> Optional["re.Match[str]"]:
        return self.regex.search(text)


@dataclass(frozen=True)
class LiteralSource:
    text: str


@dataclass(frozen=True)
class PromptSource:
    pass


@dataclass(frozen=True)
class InvalidSource:
    value: Any


PatternSource = Union[LiteralSource, PromptSource, InvalidSource]


def classify_source(value: Any) -> PatternSource:
    """Classifies a raw pattern value into one of the three source kinds.

    `None` and `MISSING` both mean "absent". Note that `bool` and `bytes`
    values are invalid, not coerced.
    """
    if isinstance(value, str):
        return LiteralSource(value)
    if value is None or value is MISSING:
        return PromptSource()
    return InvalidSource(value)


def compile_pattern(text: str) -> Pattern:
    """Compiles `text` into a `Pattern`.

    Raises:
        InvalidPattern: If `text` is not a valid regular expression. The
            exception message is the regex engine's own diagnostic.
    """
    try:
        regex = re.compile(text)
    except re.error as e:
        logging.debug(f"PatternResolver: cannot compile {text!r}: {e}")
        raise InvalidPattern(text, str(e)) from e
    return Pattern(regex=regex, source=text)


def _render_value(value: Any) -> str:
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)


def resolve_pattern(value: Any, prompt: PromptFunc) -> Optional[Pattern]:
    """Resolves a raw pattern value into a compiled pattern.

    Args:
        value: A string, `None`/`MISSING` (ask the user), or anything else.
        prompt: Called at most once, only for absent values. Returns the
            user's input, or None if the user cancelled.

    Returns:
        The compiled pattern, or None when the user cancelled the prompt.

    Raises:
        InvalidPattern: The string does not compile.
        InvalidArgument: `value` is neither a string nor absent.
    """
    source = classify_source(value)

    if isinstance(source, LiteralSource):
        return compile_pattern(source.text)

    if isinstance(source, PromptSource):
        entered = prompt()
        if entered is None:
            logging.info("PatternResolver: pattern prompt cancelled.")
            return None
        return compile_pattern(entered)

    raise InvalidArgument(source.value, _render_value(source.value))
