from __future__ import annotations

from better_path.core.config import (
    PathCompletionOptions,
    PathCompletionSettings,
    load_options,
)
from better_path.core.errors import (
    ConfigurationError,
    PathCompletionError,
    PreviewError,
    ScanError,
    StatError,
)
from better_path.core.matcher import KEYWORD_PATTERN, PathMatch, match_path_prefix
from better_path.core.resolver import DynamicBaseDirs, FixedBaseDirs
from better_path.core.source import TRIGGER_CHARACTERS, PathCompletionSource
from better_path.core.types import (
    Candidate,
    CandidateKind,
    DirectoryCandidate,
    EditingMode,
    EntryStat,
    EntryType,
    FileCandidate,
    Preview,
    PreviewFormat,
    RequestContext,
)

__version__ = "0.1.0"

__all__ = [
    "KEYWORD_PATTERN",
    "TRIGGER_CHARACTERS",
    "Candidate",
    "CandidateKind",
    "ConfigurationError",
    "DirectoryCandidate",
    "DynamicBaseDirs",
    "EditingMode",
    "EntryStat",
    "EntryType",
    "FileCandidate",
    "FixedBaseDirs",
    "PathCompletionError",
    "PathCompletionOptions",
    "PathCompletionSettings",
    "PathCompletionSource",
    "PathMatch",
    "Preview",
    "PreviewError",
    "PreviewFormat",
    "RequestContext",
    "ScanError",
    "StatError",
    "load_options",
    "match_path_prefix",
]
