"""Error types for path completion.

Only ``ConfigurationError`` is meant to reach the host. The others are
raised inside a single unit of work (one base directory, one entry, one
preview) and recovered from right above it.
"""

from __future__ import annotations


class PathCompletionError(Exception):
    """Base class for all path completion errors."""


class ConfigurationError(PathCompletionError):
    """Raised when a completion option has the wrong type."""


class ScanError(PathCompletionError):
    """Raised when a resolved directory cannot be opened or listed."""

    def __init__(self, directory: str, cause: OSError) -> None:
        self.directory = directory
        self.cause = cause
        super().__init__(f"Cannot scan '{directory}': {cause}")


class StatError(PathCompletionError):
    """Raised when a directory entry cannot be stat'd."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot stat '{path}': {cause}")


class PreviewError(PathCompletionError):
    """Raised when a file preview cannot be read."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot preview '{path}': {cause}")
