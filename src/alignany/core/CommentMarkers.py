# alignany/core/CommentMarkers.py
"""CommentMarkers Module
=====================
Static lookup from a language identifier to the regular expression that
finds where a comment starts on a line. The "align comments" command uses
it to pick its pattern.

Key Features:
-------------
- Read-only table covering one-line markers (`#`, `;`, `%`, `//`), block
  openers (`<!--`, `/*`) and alternations of both (`--|/\\*`).
- Generic fallback `/[/*]` for unknown languages. It matches `//` or `/*`
  anywhere on the line, which covers most C-family languages and can misfire
  inside string literals such as URLs.
- Mapping from a Pygments lexer (name and aliases) to a table identifier,
  so documents loaded from disk can be classified by filename or content.
- Per-user overrides from the `[comment_patterns]` configuration section,
  layered over the built-in table without mutating it.
"""

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional


if TYPE_CHECKING:
    from pygments.lexer import Lexer


FALLBACK_COMMENT_PATTERN = "/[/*]"

COMMENT_PATTERNS: Mapping[str, str] = MappingProxyType({
    "coffeescript":     "#",
    "dockercompose":    "#",
    "dockerfile":       "#",
    "elixir":           "#",
    "gdscript":         "#",
    "ignore":           "#",
    "julia":            "#",
    "makefile":         "#",
    "perl":             "#",
    "powershell":       "#",
    "python":           "#",
    "r":                "#",
    "raku":             "#",
    "ruby":             "#",
    "shellscript":      "#",
    "ssh_config":       "#",
    "yaml":             "#",

    "html":             "<!--",
    "markdown":         "<!--",
    "php":              "<!--",
    "razor":            "<!--",
    "xml":              "<!--",
    "xsl":              "<!--",

    "ada":              r"--|/\*",
    "lua":              r"--|/\*",
    "haskell":          r"--|/\*",
    "sql":              r"--|/\*",
    "sqlite":           r"--|/\*",

    "bibtex":           "%",
    "erlang":           "%",
    "latex":            "%",
    "matlab":           "%",
    "tex":              "%",

    "gdresource":       ";",
    "gdscene":          ";",
    "ini":              ";",
    "properties":       ";",

    "fsharp":           "//",
    "shaderlab":        "//",

    "bat":              "@[rR][eE][mM]",
    "css":              r"/\*",
    "clojure":          ";;",
    "handlebars":       "{{!--",
    "jade":             "//-",
    "ocaml":            r"\(\*",
    "prolog":           r"%|/\*",
    "restructuredtext": "..",
    "vb":               "'",
})

# Pygments lexer names/aliases whose spelling differs from the table key.
LEXER_ALIASES: Mapping[str, str] = MappingProxyType({
    "bash": "shellscript", "sh": "shellscript", "zsh": "shellscript",
    "ksh": "shellscript", "shell": "shellscript",
    "docker": "dockerfile",
    "make": "makefile", "mf": "makefile", "bsdmake": "makefile",
    "pwsh": "powershell", "posh": "powershell", "ps1": "powershell",
    "perl6": "raku", "pl6": "raku",
    "splus": "r",
    "coffee": "coffeescript", "coffee-script": "coffeescript",
    "xslt": "xsl",
    "sqlite3": "sqlite",
    "bib": "bibtex",
    "dosini": "ini", "cfg": "ini",
    "jproperties": "properties",
    "f#": "fsharp",
    "batch": "bat", "batchfile": "bat", "dosbatch": "bat", "winbatch": "bat",
    "clj": "clojure",
    "pug": "jade",
    "rst": "restructuredtext", "rest": "restructuredtext",
    "vb.net": "vb", "vbnet": "vb",
    "md": "markdown",
    "hs": "haskell",
    "gd": "gdscript",
    "jl": "julia",
    "py": "python", "python3": "python", "py3": "python",
    "rb": "ruby",
})


def language_id_for_lexer(lexer: "Lexer") -> Optional[str]:
    """Maps a Pygments lexer to a comment-table language identifier.

    The lexer's primary name is tried first, then each of its aliases; a
    candidate matches when it is a table key itself or a known spelling
    variant of one.

    Args:
        lexer: Any Pygments lexer instance.

    Returns:
        The language identifier, or None if the lexer is not covered.
    """
    candidates = [lexer.name.lower()]
    candidates.extend(alias.lower() for alias in getattr(lexer, "aliases", []))

    for candidate in candidates:
        if candidate in COMMENT_PATTERNS:
            return candidate
        if candidate in LEXER_ALIASES:
            return LEXER_ALIASES[candidate]

    logging.debug(f"CommentMarkers: no language id for lexer '{lexer.name}'.")
    return None


class CommentMarkers:
    """The comment table as seen by one configuration.

    Attributes:
        patterns: Read-only merged view of the built-in table and the
            overrides given at construction.
        fallback: Pattern used for languages missing from `patterns`.
    """

    def __init__(
        self,
        overrides: Optional[Mapping[str, Any]] = None,
        fallback: str = FALLBACK_COMMENT_PATTERN,
    ) -> None:
        merged = dict(COMMENT_PATTERNS)
        if overrides is not None and not isinstance(overrides, Mapping):
            logging.warning(
                f"CommentMarkers: overrides must be a table, got {overrides!r}. Ignoring them."
            )
            overrides = None
        for language_id, pattern in (overrides or {}).items():
            if not isinstance(pattern, str):
                logging.warning(
                    f"CommentMarkers: ignoring non-string pattern for '{language_id}': {pattern!r}"
                )
                continue
            merged[language_id] = pattern
        self.patterns: Mapping[str, str] = MappingProxyType(merged)
        self.fallback = fallback

    def pattern_for(self, language_id: Optional[str]) -> str:
        if language_id is None:
            return self.fallback
        pattern = self.patterns.get(language_id)
        if pattern is None:
            logging.debug(
                f"CommentMarkers: '{language_id}' not mapped, using fallback {self.fallback!r}."
            )
            return self.fallback
        return pattern
