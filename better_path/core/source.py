"""Path completion source.

Wires matching, base directory resolution, scanning and candidate building
for completion requests, and preview generation for resolve requests.

Usage:
    from better_path import PathCompletionSource, RequestContext

    source = PathCompletionSource({"label_trailing_slash": False})
    items = source.complete(RequestContext(cursor_line_prefix="open ./src/"))
    item = source.resolve(items[0])
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
import dataclasses
import logging
from typing import Any

from better_path.core.candidates import build_candidates
from better_path.core.config import PathCompletionOptions
from better_path.core.errors import PreviewError, ScanError
from better_path.core.matcher import KEYWORD_PATTERN, PathMatch, match_path_prefix
from better_path.core.preview import LanguageDetector, PreviewGenerator, detect_language
from better_path.core.resolver import resolve_directories
from better_path.core.scanner import include_hidden, scan_directory
from better_path.core.types import (
    Candidate,
    EntryType,
    RequestContext,
    ResolvedDirectory,
)

logger = logging.getLogger(__name__)

TRIGGER_CHARACTERS = ["/", "."]

CompletionCallback = Callable[[list[Candidate] | None], None]
ResolveCallback = Callable[[Candidate], None]


class PathCompletionSource:
    """Completes filesystem paths typed before the cursor.

    ``complete`` returns None when the cursor is not after something
    path-like, and a possibly empty list otherwise. Neither ``complete`` nor
    ``resolve`` raises for filesystem problems: unreadable directories,
    entries and files are left out of the result instead.
    """

    def __init__(
        self,
        options: PathCompletionOptions | Mapping[str, Any] | None = None,
        language_detector: LanguageDetector | None = detect_language,
    ) -> None:
        """Initialize the source.

        Args:
            options: Validated options, or raw option values to validate.
            language_detector: Maps a file name to a code-fence language tag.
                None disables fenced previews.

        Raises:
            ConfigurationError: An option has the wrong type.
        """
        if options is None:
            options = PathCompletionOptions()
        elif not isinstance(options, PathCompletionOptions):
            options = PathCompletionOptions.from_mapping(options)
        self.options = options
        self.preview_generator = PreviewGenerator(language_detector)

    @property
    def trigger_characters(self) -> list[str]:
        return list(TRIGGER_CHARACTERS)

    @property
    def keyword_pattern(self) -> str:
        return KEYWORD_PATTERN

    def _plan(
        self, context: RequestContext
    ) -> tuple[list[ResolvedDirectory], bool] | None:
        match: PathMatch | None = match_path_prefix(context.cursor_line_prefix)
        if match is None:
            return None
        directories = resolve_directories(
            match.dirname, context, self.options.get_cwd
        )
        hidden = include_hidden(
            context, match, self.options.show_hidden_files_by_default
        )
        return directories, hidden

    def _candidates_in(
        self, directory: ResolvedDirectory, hidden: bool
    ) -> list[Candidate]:
        return build_candidates(scan_directory(directory, hidden), self.options)

    def complete(
        self, context: RequestContext, callback: CompletionCallback | None = None
    ) -> list[Candidate] | None:
        """List candidates for the path before the cursor.

        Args:
            context: The completion request.
            callback: Invoked exactly once with the result.

        Returns:
            None if the text before the cursor is not path-like, otherwise
            the candidates of every resolved directory in resolution order.
        """
        result: list[Candidate] | None = None
        plan = self._plan(context)
        if plan is not None:
            directories, hidden = plan
            result = []
            for directory in directories:
                try:
                    result.extend(self._candidates_in(directory, hidden))
                except ScanError as e:
                    logger.debug(f"Skipping directory: {e}")

        if callback is not None:
            callback(result)
        return result

    async def complete_async(self, context: RequestContext) -> list[Candidate] | None:
        """Like ``complete``, scanning base directories concurrently."""
        plan = self._plan(context)
        if plan is None:
            return None
        directories, hidden = plan

        tasks = [
            asyncio.to_thread(self._candidates_in, directory, hidden)
            for directory in directories
        ]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        candidates: list[Candidate] = []
        for result in results:
            if isinstance(result, ScanError):
                logger.debug(f"Skipping directory: {result}")
            elif isinstance(result, BaseException):
                raise result
            else:
                candidates.extend(result)
        return candidates

    def _is_previewable(self, candidate: Candidate) -> bool:
        return candidate.stat.type == EntryType.FILE

    def resolve(
        self, candidate: Candidate, callback: ResolveCallback | None = None
    ) -> Candidate:
        """Attach a preview to a file candidate.

        Returns a copy with ``preview`` set, or the candidate itself when it
        is not a regular file, or the file is empty or can't be read. Calling
        it again on either gives the same preview.
        """
        resolved = candidate
        if self._is_previewable(candidate):
            try:
                preview = self.preview_generator.generate(candidate.path)
            except PreviewError as e:
                logger.debug(f"No preview: {e}")
            else:
                if preview is not None:
                    resolved = dataclasses.replace(candidate, preview=preview)

        if callback is not None:
            callback(resolved)
        return resolved

    async def resolve_async(
        self, candidate: Candidate, timeout: float | None = None
    ) -> Candidate:
        """Like ``resolve``, reading the file in a worker thread.

        A read that takes longer than ``timeout`` seconds leaves the
        candidate unchanged.
        """
        if not self._is_previewable(candidate):
            return candidate
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self.resolve, candidate), timeout
            )
        except TimeoutError:
            logger.debug(f"Preview of {candidate.path} timed out after {timeout}s")
            return candidate
