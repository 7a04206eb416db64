# alignany/core/Aligner.py
"""Aligner Module
==============
This module defines the `Aligner` class, the command surface of alignany.
It wires the pipeline together for the three user-facing commands:

- Align assignment operators: pattern `" = "`.
- Align comments: pattern picked from the comment-marker table by the
  document's language, or the generic fallback.
- Align custom pattern: pattern passed as an argument, or asked for
  interactively when no argument is given.

Pipeline:
---------
1. Resolve the pattern (may prompt the user, exactly once).
2. Fetch the active document from the host.
3. Normalize the host's selections into line ranges.
4. Locate the first match on every scanned line.
5. Plan the padding for each line.
6. Emit all insertions as a single undoable batch.

Every failure is terminal for the command and nothing is edited; the error
message goes to the host's `report_error`. A cancelled prompt ends the
command silently.
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

from alignany.core.AlignmentPlanner import AlignmentPlan, plan_alignment
from alignany.core.CommentMarkers import FALLBACK_COMMENT_PATTERN, CommentMarkers
from alignany.core.EditEmitter import EditEmitter
from alignany.core.Errors import AlignmentError, NoActiveDocument
from alignany.core.MatchLocator import locate_matches
from alignany.core.PatternResolver import MISSING, Pattern, resolve_pattern
from alignany.core.SelectionNormalizer import normalize_selections


if TYPE_CHECKING:
    from alignany.core.Host import AlignmentDocument, AlignmentHost


ASSIGNMENT_PATTERN = " = "


## ================= Aligner Class ====================
class Aligner:
    """Runs alignment commands against a host.

    The instance holds no per-command state; every call reads the document
    afresh, so commands can be invoked repeatedly.

    Attributes:
        host: The host environment providing documents, prompts and error display.
        config: Application configuration. Only the `[alignment]` and
            `[comment_patterns]` sections are read.
        comment_markers: Comment table merged with configured overrides.
        last_plan: The plan applied by the most recent successful command,
            kept for callers that want to report what changed.
    """

    COMMANDS = ("assignment", "comments", "custom")

    def __init__(
        self, host: "AlignmentHost", config: Optional[dict[str, Any]] = None
    ) -> None:
        self.host = host
        self.config: dict[str, Any] = config or {}
        alignment_config = self._section("alignment")
        self.assignment_pattern: str = alignment_config.get(
            "assignment_pattern", ASSIGNMENT_PATTERN
        )
        self.comment_markers = CommentMarkers(
            self._section("comment_patterns"),
            fallback=alignment_config.get(
                "fallback_comment_pattern", FALLBACK_COMMENT_PATTERN
            ),
        )
        self.last_plan: Optional[AlignmentPlan] = None

    # --- Commands ---
    def align_assignment_operators(self) -> bool:
        """Aligns the first `" = "` of each selected line."""
        return self.align_custom_pattern(self.assignment_pattern)

    def align_comments(self) -> bool:
        """Aligns the first comment marker of each selected line.

        The document is required up front because its language decides the
        pattern.
        """
        document = self.host.active_document()
        if document is None:
            self._report(NoActiveDocument())
            return False

        pattern = self.comment_markers.pattern_for(document.language_id)
        logging.debug(
            f"Aligner: comment pattern for language '{document.language_id}' is {pattern!r}."
        )
        return self.align_custom_pattern(pattern)

    def align_custom_pattern(self, pattern: Any = MISSING) -> bool:
        """Aligns the first match of `pattern` on each selected line.

        Args:
            pattern: A regular expression string. When omitted (or None) the
                host is asked for one.

        Returns:
            True if the lines are aligned afterwards (including the case where
            nothing had to move), False on cancellation or failure.
        """
        try:
            compiled = resolve_pattern(pattern, self.host.prompt_for_pattern)
            if compiled is None:
                return False

            document = self.host.active_document()
            if document is None:
                raise NoActiveDocument()

            self.last_plan = self._align(document, compiled)
            return True
        except AlignmentError as e:
            self._report(e)
            return False

    def run(self, command: str, pattern: Any = MISSING) -> bool:
        """Dispatches a command by name.

        Args:
            command: One of `Aligner.COMMANDS`.
            pattern: Only used by the `custom` command.

        Raises:
            ValueError: If `command` is unknown.
        """
        handlers: dict[str, Callable[[], bool]] = {
            "assignment": self.align_assignment_operators,
            "comments": self.align_comments,
            "custom": lambda: self.align_custom_pattern(pattern),
        }
        handler = handlers.get(command)
        if handler is None:
            raise ValueError(
                f"Unknown alignment command '{command}'. Expected one of: {', '.join(self.COMMANDS)}"
            )
        logging.info(f"Aligner: running '{command}' command.")
        return handler()

    def _section(self, name: str) -> Mapping[str, Any]:
        section = self.config.get(name, {})
        if not isinstance(section, Mapping):
            logging.warning(
                f"Aligner: config section [{name}] should be a table, got {section!r}. Using defaults."
            )
            return {}
        return section

    # --- Pipeline ---
    def _align(self, document: "AlignmentDocument", pattern: Pattern) -> AlignmentPlan:
        lines = document.lines()
        ranges = normalize_selections(document.selections(), len(lines))
        scan = locate_matches(lines, ranges, pattern)
        plan = plan_alignment(scan, pattern)
        inserted = EditEmitter(document).emit(plan)
        logging.info(
            f"Aligner: /{pattern.source}/ aligned {plan.match_count} line(s) "
            f"at column {plan.column}, padded {inserted}."
        )
        return plan

    def _report(self, error: AlignmentError) -> None:
        logging.warning(f"Aligner: {type(error).__name__}: {error}")
        self.host.report_error(str(error))
