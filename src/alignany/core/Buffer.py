# alignany/core/Buffer.py
"""Buffer Module
=============
This module defines the `Buffer` class, an in-memory list-of-lines document
that implements the `AlignmentDocument` interface. It is the host used by
the command-line front end and by the test suite.

Key Features:
-------------
- File loading with encoding detection (`chardet`), newline-style detection
  and trailing-newline preservation on save.
- Language detection with Pygments: by filename first, then by content,
  then plain text; an explicit language id always wins.
- Cursor and span selections validated against the buffer's bounds.
- Atomic batches of insertions recorded as one compound undo step.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Sequence, Union

import chardet
from pygments.lexers import TextLexer, get_lexer_for_filename, guess_lexer
from pygments.util import ClassNotFound

from alignany.core.AlignmentPlanner import Insertion
from alignany.core.CommentMarkers import language_id_for_lexer
from alignany.core.History import History
from alignany.core.Selection import Position, Selection


PathLike = Union[str, "os.PathLike[str]"]

CHARDET_SAMPLE_SIZE = 1024 * 20
CHARDET_MIN_CONFIDENCE = 0.75


## ================= Buffer Class ====================
class Buffer:
    """A text document made of lines, with selections and undo history.

    Attributes:
        text (list[str]): The lines, without newline characters.
        filename (Optional[str]): Path the buffer was loaded from or is saved to.
        encoding (str): Encoding used when saving.
        newline (str): Line separator used when saving ("\\n" or "\\r\\n").
        trailing_newline (bool): Whether the saved text ends with a newline.
        modified (bool): True if the text changed since load/save.
        history (History): Undo/redo manager.
    """

    def __init__(
        self,
        lines: Optional[Sequence[str]] = None,
        filename: Optional[str] = None,
        language_id: Optional[str] = None,
        encoding: str = "utf-8",
        newline: str = "\n",
        trailing_newline: bool = True,
    ) -> None:
        self.text: list[str] = list(lines) if lines else [""]
        for row, line in enumerate(self.text):
            if "\n" in line or "\r" in line:
                raise ValueError(f"Line {row} contains a line break.")
        self.filename = filename
        self.encoding = encoding
        self.newline = newline
        self.trailing_newline = trailing_newline
        self.modified = False
        self.history = History(self)
        self._language_override = language_id
        self._detected_language: Optional[str] = None
        self._language_detected = False
        self._selections: list[Selection] = [Selection.cursor(0, 0)]

    # --- Construction ---
    @classmethod
    def from_text(
        cls,
        content: str,
        filename: Optional[str] = None,
        language_id: Optional[str] = None,
        encoding: str = "utf-8",
    ) -> "Buffer":
        """Creates a buffer from a string, remembering its newline style."""
        newline = "\r\n" if "\r\n" in content else "\n"
        normalized = content.replace("\r\n", "\n").replace("\r", "\n")
        trailing_newline = normalized.endswith("\n")
        if trailing_newline:
            normalized = normalized[:-1]
        return cls(
            normalized.split("\n"),
            filename=filename,
            language_id=language_id,
            encoding=encoding,
            newline=newline,
            trailing_newline=trailing_newline,
        )

    @classmethod
    def from_file(cls, path: PathLike, language_id: Optional[str] = None) -> "Buffer":
        """Loads a file, guessing its encoding with chardet.

        The chardet guess is used when its confidence is at least 0.75;
        otherwise UTF-8 is tried, then latin-1 (which always decodes).

        Raises:
            OSError: If the file cannot be read.
        """
        filename = os.fspath(path)
        raw = Path(filename).read_bytes()

        candidates: list[str] = []
        if raw:
            result = chardet.detect(raw[:CHARDET_SAMPLE_SIZE])
            guess = result.get("encoding")
            confidence = result.get("confidence") or 0.0
            logging.debug(
                f"Chardet detected encoding '{guess}' with confidence {confidence:.2f} for '{filename}'."
            )
            if guess and confidence >= CHARDET_MIN_CONFIDENCE:
                candidates.append(guess)
        if "utf-8" not in candidates:
            candidates.append("utf-8")

        # latin-1 maps every byte, so it is the last resort.
        content, used_encoding = raw.decode("latin-1"), "latin-1"
        for encoding in candidates:
            try:
                content, used_encoding = raw.decode(encoding), encoding
                break
            except (UnicodeDecodeError, LookupError):
                logging.debug(f"Buffer: decoding '{filename}' as {encoding} failed.")

        logging.info(f"Buffer: loaded '{filename}' ({used_encoding}).")
        return cls.from_text(
            content, filename=filename, language_id=language_id, encoding=used_encoding
        )

    # --- Serialization ---
    def to_text(self) -> str:
        content = self.newline.join(self.text)
        if self.trailing_newline:
            content += self.newline
        return content

    def save(self, path: Optional[PathLike] = None) -> str:
        """Writes the buffer to `path` (default: its filename) and returns the path.

        Raises:
            ValueError: If there is neither `path` nor a filename.
            OSError: If writing fails.
        """
        target = os.fspath(path) if path is not None else self.filename
        if not target:
            raise ValueError("Buffer has no filename to save to.")
        try:
            with open(target, "w", encoding=self.encoding, errors="replace", newline="") as f:
                f.write(self.to_text())
        except OSError as e:
            logging.error(f"Failed to write file '{target}': {e}", exc_info=True)
            raise
        self.filename = target
        self.modified = False
        self.history.mark_saved()
        logging.debug(f"Successfully wrote to '{target}'")
        return target

    # --- AlignmentDocument interface ---
    @property
    def language_id(self) -> Optional[str]:
        if self._language_override is not None:
            return self._language_override
        if not self._language_detected:
            self.detect_language()
        return self._detected_language

    def lines(self) -> Sequence[str]:
        return tuple(self.text)

    def selections(self) -> Sequence[Selection]:
        return tuple(self._selections)

    def apply_insertions(self, batch: Sequence[Insertion]) -> bool:
        """Applies a batch of insertions as one undoable edit.

        Every insertion is validated against the current text before anything
        is changed; an invalid batch leaves the buffer untouched. Insertions
        on the same line are applied right to left so that all columns refer
        to the text as it was before the batch.

        Returns:
            bool: True if the batch was applied, False if it was rejected.
        """
        for insertion in batch:
            problem = self._validate_insertion(insertion)
            if problem:
                logging.error(f"Buffer: rejecting insertion batch: {problem}")
                return False

        ordered = sorted(batch, key=lambda ins: (ins.line, -ins.column))
        self.history.begin_compound_action()
        try:
            for insertion in ordered:
                if not insertion.text:
                    continue
                self.insert_text_at_position(insertion.text, insertion.line, insertion.column)
                self.history.add_action(
                    {
                        "type": "insert",
                        "text": insertion.text,
                        "position": (insertion.line, insertion.column),
                    }
                )
        finally:
            self.history.end_compound_action()
        return True

    # --- Selections ---
    def set_selections(self, selections: Sequence[Selection]) -> None:
        """Replaces the selections after checking they lie inside the buffer.

        Raises:
            ValueError: If the list is empty or a selection is out of bounds.
        """
        if not selections:
            raise ValueError("At least one selection (or cursor) is required.")
        for selection in selections:
            for point in (selection.start, selection.end):
                self._check_position(point)
        self._selections = list(selections)

    # --- Editing ---
    def insert_text_at_position(self, text: str, row: int, col: int) -> bool:
        """Low-level insertion of single-line `text` at (row, col).

        It does NOT add to action history; the caller is responsible for that.

        Returns:
            bool: True if text was non-empty and thus inserted, False otherwise.

        Raises:
            IndexError: If `row` is out of bounds.
            ValueError: If `text` contains a line break.
        """
        if not text:
            return False
        if "\n" in text or "\r" in text:
            raise ValueError("insert_text_at_position: text must not contain line breaks")
        if not (0 <= row < len(self.text)):
            msg = f"insert_text_at_position: invalid row index {row} (buffer size {len(self.text)})"
            logging.error(msg)
            raise IndexError(msg)

        line = self.text[row]
        if not (0 <= col <= len(line)):
            logging.warning(
                f"insert_text_at_position: column {col} out of bounds for line {row} (len {len(line)}). Clamping."
            )
            col = max(0, min(col, len(line)))

        self.text[row] = line[:col] + text + line[col:]
        self.modified = True
        return True

    def undo(self) -> bool:
        return self.history.undo()

    def redo(self) -> bool:
        return self.history.redo()

    # --- Language detection ---
    def detect_language(self) -> Optional[str]:
        """Detects the language id with Pygments and caches it.

        Priority: filename > content > plain text (no language id).
        """
        lexer = None
        if self.filename:
            try:
                lexer = get_lexer_for_filename(self.filename)
                logging.debug(f"Pygments: Detected '{lexer.name}' by filename.")
            except ClassNotFound:
                logging.debug(f"Pygments: No lexer for filename '{self.filename}'.")

        if lexer is None:
            sample = "\n".join(self.text[:200])[:10000]
            if sample.strip():
                try:
                    lexer = guess_lexer(sample)
                    logging.debug(f"Pygments: Guessed '{lexer.name}' by content.")
                except ClassNotFound:
                    logging.debug("Pygments: Content guess failed.")

        if lexer is None:
            lexer = TextLexer()

        self._detected_language = language_id_for_lexer(lexer)
        self._language_detected = True
        return self._detected_language

    # --- Helpers ---
    def _check_position(self, point: Position) -> None:
        if not (0 <= point.line < len(self.text)):
            raise ValueError(
                f"Line {point.line + 1} is outside the buffer ({len(self.text)} lines)."
            )
        if not (0 <= point.column <= len(self.text[point.line])):
            raise ValueError(
                f"Column {point.column + 1} is outside line {point.line + 1} "
                f"({len(self.text[point.line])} characters)."
            )

    def _validate_insertion(self, insertion: Insertion) -> Optional[str]:
        if not (0 <= insertion.line < len(self.text)):
            return f"line {insertion.line} out of range"
        if not (0 <= insertion.column <= len(self.text[insertion.line])):
            return f"column {insertion.column} out of range on line {insertion.line}"
        if "\n" in insertion.text or "\r" in insertion.text:
            return f"text for line {insertion.line} contains a line break"
        return None
