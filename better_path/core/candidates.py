from __future__ import annotations

from collections.abc import Iterable

from better_path.core.config import PathCompletionOptions
from better_path.core.types import (
    Candidate,
    DirectoryCandidate,
    EntryType,
    FileCandidate,
    ScanEntry,
)


def build_candidate(entry: ScanEntry, options: PathCompletionOptions) -> Candidate:
    """Map a scanned entry to a completion candidate.

    Directories always insert a trailing slash; whether the label shows one
    and whether a bare ``word`` is set depend on the options. Everything
    that is not a directory, broken symlinks included, is a file.
    """
    name = entry.name
    if entry.stat.type == EntryType.DIRECTORY:
        return DirectoryCandidate(
            label=name + "/" if options.label_trailing_slash else name,
            insert_text=name + "/",
            filter_text=name,
            path=entry.path,
            stat=entry.stat,
            word=None if options.trailing_slash else name,
        )
    return FileCandidate(
        label=name,
        insert_text=name,
        filter_text=name,
        path=entry.path,
        stat=entry.stat,
    )


def build_candidates(
    entries: Iterable[ScanEntry], options: PathCompletionOptions
) -> list[Candidate]:
    return [build_candidate(entry, options) for entry in entries]
