"""File previews, produced only when a candidate is resolved."""

from __future__ import annotations

from collections.abc import Callable
import logging
import os
import re

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from better_path.core.errors import PreviewError
from better_path.core.types import Preview, PreviewFormat

logger = logging.getLogger(__name__)

MAX_PREVIEW_LINES = 20
PREVIEW_READ_BYTES = 1024
BINARY_PREVIEW = "binary file"

_LINE_RE = re.compile(r"[^\r\n]+")

LanguageDetector = Callable[[str], str | None]


def detect_language(filename: str) -> str | None:
    """Guess a fenced-code language tag from a file name via pygments."""
    try:
        lexer = get_lexer_for_filename(os.path.basename(filename))
    except ClassNotFound:
        return None
    if lexer.aliases:
        return lexer.aliases[0]
    return lexer.name.lower()


class PreviewGenerator:
    """Builds a bounded text preview of a file.

    Only the first ``PREVIEW_READ_BYTES`` bytes are read, so the cost does
    not depend on file size.
    """

    def __init__(
        self,
        language_detector: LanguageDetector | None = detect_language,
        max_lines: int = MAX_PREVIEW_LINES,
    ) -> None:
        self.language_detector = language_detector
        self.max_lines = max_lines

    def generate(self, path: str) -> Preview | None:
        """Preview the start of the file at ``path``.

        Returns None for an empty file.

        Raises:
            PreviewError: The file can't be opened or read.
        """
        try:
            with open(path, "rb") as f:
                head = f.read(PREVIEW_READ_BYTES)
        except OSError as e:
            raise PreviewError(path, e) from e

        if not head:
            return None
        if b"\x00" in head:
            return Preview(format=PreviewFormat.PLAINTEXT, content=BINARY_PREVIEW)

        # Blank lines are dropped along with the line breaks.
        text = head.decode("utf-8", errors="replace")
        lines = _LINE_RE.findall(text)[: self.max_lines]

        language = self.language_detector(path) if self.language_detector else None
        if not language:
            return Preview(format=PreviewFormat.PLAINTEXT, content="\n".join(lines))

        logger.debug(f"Previewing {path} as {language}")
        fenced = [f"```{language}", *lines, "```"]
        return Preview(format=PreviewFormat.MARKDOWN, content="\n".join(fenced))
