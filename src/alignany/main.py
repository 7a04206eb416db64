#!/usr/bin/env python3
# alignany/main.py
"""
alignany Command-Line Entry Point
=================================

Aligns a token across the lines of a file from the shell:

    alignany config.py                          # align " = " over the whole file
    alignany --comments --select 3:1-9:1 main.c # align comments on lines 3-9
    alignany --pattern ':' --cursor 2 --cursor 3 --cursor 5 data.yaml
    alignany --prompt notes.txt                 # ask for the pattern on stdin

Steps performed by `main`:
1) Argument parsing (argparse).
2) Configuration & Logging: loads config and initializes logging ASAP.
3) Document loading into a `Buffer`, with selections from the command line.
4) Running the requested alignment command through `Aligner`.
5) Writing the result to stdout, or back to the file with --in-place.

Lines and columns on the command line are 1-based.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from alignany.core.Aligner import Aligner
from alignany.core.Buffer import Buffer
from alignany.core.PatternResolver import MISSING
from alignany.core.Selection import Position, Selection
from alignany.utils.logging_config import setup_logging
from alignany.utils.utils import load_config

logger = logging.getLogger("alignany")

EXIT_OK = 0
EXIT_ALIGNMENT_ERROR = 1
EXIT_USAGE = 2
EXIT_CANCELLED = 3

PROMPT_TEXT = "Regular expression for alignment: "


class CliHost:
    """Host adapter exposing one `Buffer` to the alignment commands.

    Errors are written to `stderr` and remembered, so the caller can tell a
    failed command from a cancelled one.
    """

    def __init__(self, buffer: Optional[Buffer], stdin: TextIO, stderr: TextIO) -> None:
        self.buffer = buffer
        self.stdin = stdin
        self.stderr = stderr
        self.errors: list[str] = []

    def active_document(self) -> Optional[Buffer]:
        return self.buffer

    def prompt_for_pattern(self) -> Optional[str]:
        self.stderr.write(PROMPT_TEXT)
        self.stderr.flush()
        try:
            line = self.stdin.readline()
        except KeyboardInterrupt:
            return None
        if not line:  # EOF
            return None
        return line.rstrip("\r\n")

    def report_error(self, message: str) -> None:
        self.errors.append(message)
        self.stderr.write(f"alignany: {message}\n")


def parse_position(text: str) -> Position:
    """Parses ``LINE`` or ``LINE:COL`` (1-based) into a 0-based `Position`."""
    line_part, _, column_part = text.partition(":")
    try:
        line = int(line_part)
        column = int(column_part) if column_part else 1
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid position '{text}', expected LINE[:COL]")
    if line < 1 or column < 1:
        raise argparse.ArgumentTypeError(f"invalid position '{text}', lines and columns start at 1")
    return Position(line - 1, column - 1)


def parse_span(text: str) -> tuple[Position, Position]:
    """Parses ``START-END`` where each end is ``LINE[:COL]``.

    An END without a column means "to the end of that line"; it is marked
    with column -1 and resolved once the buffer is loaded.
    """
    start_text, sep, end_text = text.partition("-")
    if not sep or not start_text or not end_text:
        raise argparse.ArgumentTypeError(f"invalid selection '{text}', expected START-END")
    start = parse_position(start_text)
    end = parse_position(end_text)
    if ":" not in end_text:
        end = Position(end.line, -1)
    return start, end


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="alignany",
        description="Align the first match of a pattern across lines by inserting spaces.",
    )
    parser.add_argument("file", help="File to align")

    command = parser.add_mutually_exclusive_group()
    command.add_argument(
        "--assignment", action="store_true", help='Align " = " (default command)'
    )
    command.add_argument(
        "--comments", action="store_true", help="Align comment markers for the file's language"
    )
    command.add_argument("--pattern", "-p", help="Align a custom regular expression")
    command.add_argument(
        "--prompt", action="store_true", help="Read the regular expression from stdin"
    )

    parser.add_argument(
        "--select", "-s", action="append", default=[], type=parse_span, metavar="START-END",
        help="Selection span, e.g. 3:5-7:1 or 3-7 (whole lines). Repeatable.",
    )
    parser.add_argument(
        "--cursor", "-c", action="append", default=[], type=parse_position, metavar="LINE[:COL]",
        help="Cursor position. Repeatable. A single cursor aligns the whole file.",
    )
    parser.add_argument("--language", "-l", help="Language id used by --comments (e.g. python)")
    parser.add_argument("--in-place", "-i", action="store_true", help="Rewrite the file")
    parser.add_argument("--config", help="Path to a config.toml")
    parser.add_argument("--log-level", help="Console log level (DEBUG, INFO, WARNING, ...)")
    return parser


def _selections_for(
    buffer: Buffer,
    spans: Sequence[tuple[Position, Position]],
    cursors: Sequence[Position],
) -> list[Selection]:
    selections = []
    for start, end in spans:
        if end.column < 0:
            if not (0 <= end.line < len(buffer.text)):
                raise ValueError(
                    f"Line {end.line + 1} is outside the buffer ({len(buffer.text)} lines)."
                )
            end = Position(end.line, len(buffer.text[end.line]))
        selections.append(Selection.between(start, end))
    selections.extend(Selection(point, point) for point in cursors)
    return selections


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Runs the command line and returns the process exit code."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    if args.log_level:
        config["logging"]["console_level"] = args.log_level
    setup_logging(config)
    logger.info(f"alignany starting for '{args.file}'.")

    try:
        buffer = Buffer.from_file(args.file, language_id=args.language)
    except OSError as e:
        stderr.write(f"alignany: cannot read '{args.file}': {e}\n")
        return EXIT_ALIGNMENT_ERROR

    try:
        selections = _selections_for(buffer, args.select, args.cursor)
        if selections:
            buffer.set_selections(selections)
    except ValueError as e:
        stderr.write(f"alignany: {e}\n")
        return EXIT_USAGE

    host = CliHost(buffer, stdin, stderr)
    aligner = Aligner(host, config)

    if args.comments:
        ok = aligner.run("comments")
    elif args.pattern is not None:
        ok = aligner.run("custom", args.pattern)
    elif args.prompt:
        ok = aligner.run("custom", MISSING)
    else:
        ok = aligner.run("assignment")

    if not ok:
        logger.info("alignany: command did not complete, nothing written.")
        return EXIT_ALIGNMENT_ERROR if host.errors else EXIT_CANCELLED

    if args.in_place:
        if buffer.modified:
            try:
                buffer.save()
            except OSError as e:
                stderr.write(f"alignany: cannot write '{buffer.filename}': {e}\n")
                return EXIT_ALIGNMENT_ERROR
            logger.info(f"Rewrote '{buffer.filename}'.")
    else:
        stdout.write(buffer.to_text())
    return EXIT_OK


def start() -> None:
    """Console-script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(EXIT_CANCELLED)


if __name__ == "__main__":
    start()
