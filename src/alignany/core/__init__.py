# src/alignany/core/__init__.py
"""Public facade for alignany.core: re-export main classes from CamelCase modules.

Keeps Java-like file names (Aligner.py, Buffer.py, ...),
but provides flat imports for convenience and stability.
"""

# Re-export classes/symbols from CamelCase modules
from .Aligner import Aligner  # noqa: F401
from .AlignmentPlanner import AlignmentPlan, Insertion, plan_alignment  # noqa: F401
from .Buffer import Buffer  # noqa: F401
from .CommentMarkers import (  # noqa: F401
    COMMENT_PATTERNS,
    FALLBACK_COMMENT_PATTERN,
    CommentMarkers,
)
from .EditEmitter import EditEmitter  # noqa: F401
from .Errors import (  # noqa: F401
    AlignmentError,
    DuplicateLineSelection,
    EditRejected,
    InsufficientLines,
    InsufficientSelection,
    InvalidArgument,
    InvalidPattern,
    NoActiveDocument,
    NoMatchesFound,
    SingleMatchFound,
)
from .History import History  # noqa: F401
from .Host import AlignmentDocument, AlignmentHost  # noqa: F401
from .MatchLocator import MatchPosition, MatchScan, locate_matches  # noqa: F401
from .PatternResolver import MISSING, Pattern, compile_pattern, resolve_pattern  # noqa: F401
from .Selection import LineRange, Position, Selection  # noqa: F401
from .SelectionNormalizer import normalize_selections  # noqa: F401


__all__ = [
    "Aligner",
    "AlignmentPlan",
    "Insertion",
    "plan_alignment",
    "Buffer",
    "COMMENT_PATTERNS",
    "FALLBACK_COMMENT_PATTERN",
    "CommentMarkers",
    "EditEmitter",
    "AlignmentError",
    "DuplicateLineSelection",
    "EditRejected",
    "InsufficientLines",
    "InsufficientSelection",
    "InvalidArgument",
    "InvalidPattern",
    "NoActiveDocument",
    "NoMatchesFound",
    "SingleMatchFound",
    "History",
    "AlignmentDocument",
    "AlignmentHost",
    "MatchPosition",
    "MatchScan",
    "locate_matches",
    "MISSING",
    "Pattern",
    "compile_pattern",
    "resolve_pattern",
    "LineRange",
    "Position",
    "Selection",
    "normalize_selections",
]
