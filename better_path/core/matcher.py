"""Detect a path being typed right before the cursor."""

from __future__ import annotations

from dataclasses import dataclass
import re

# One entry-name character.
NAME_PATTERN = r"[^/\\:*?<>'\"`| ]"

# Hosts use this to find where the typed entry name starts.
KEYWORD_PATTERN = NAME_PATTERN + "*"

SEPARATORS = "/\\"

_PATH_RE = re.compile(rf"{NAME_PATTERN}*(?:[/\\]{NAME_PATTERN}*)+$")


@dataclass(frozen=True)
class PathMatch:
    """A path-like suffix of the text before the cursor.

    Attributes:
        start: 0-based index in the line where the path begins.
        path: The matched text, up to the cursor.
        dirname: Everything before the last separator, or the separator
            itself when the path is rooted (``/foo`` gives ``/``).
        partial: The entry name being typed after the last separator.
        keyword_offset: 1-based byte offset in the UTF-8 encoded line of the
            first character of ``partial``.
    """

    start: int
    path: str
    dirname: str
    partial: str
    keyword_offset: int


def match_path_prefix(text: str) -> PathMatch | None:
    """Return the longest path-like suffix of ``text``, or None.

    The suffix is made of entry-name characters and must contain at least
    one ``/`` or ``\\``. Quotes and spaces end it.
    """
    m = _PATH_RE.search(text)
    if m is None:
        return None

    path = m.group(0)
    last_sep = max(path.rfind(sep) for sep in SEPARATORS)
    dirname = path[:last_sep] or path[last_sep]
    partial_start = m.start() + last_sep + 1
    return PathMatch(
        start=m.start(),
        path=path,
        dirname=dirname,
        partial=path[last_sep + 1 :],
        keyword_offset=len(text[:partial_start].encode()) + 1,
    )
