"""Data model shared by the completion pipeline.

Request input is a pydantic model since it crosses the host boundary.
Everything the pipeline produces is a frozen dataclass: candidates are
built per request and enriched by copying, never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import os
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class EditingMode(StrEnum):
    """Editing context the completion was requested from."""

    NORMAL = "normal"
    COMMAND = "command"


class EntryType(StrEnum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    UNKNOWN = "unknown"


class CandidateKind(StrEnum):
    FILE = "file"
    FOLDER = "folder"


class PreviewFormat(StrEnum):
    PLAINTEXT = "plaintext"
    MARKDOWN = "markdown"


class RequestContext(BaseModel):
    """What the host knows about the cursor when it asks for completions.

    Attributes:
        cursor_line_prefix: Text of the cursor line, from line start to cursor.
        cursor_offset: 1-based byte offset, in the UTF-8 encoded line, where
            the host's completion keyword starts. Defaults to the first
            byte of the entry name being typed.
        mode: Editing mode. Command mode only completes against the
            process working directory.
        buffer_id: Opaque host buffer identifier.
        buffer_path: File backing the buffer, if any.
    """

    model_config = ConfigDict(frozen=True)

    cursor_line_prefix: str
    cursor_offset: int | None = Field(default=None, ge=1)
    mode: EditingMode = EditingMode.NORMAL
    buffer_id: Any = None
    buffer_path: str | None = None


@dataclass(frozen=True)
class EntryStat:
    """Classification of a directory entry.

    ``lstat`` is only populated for broken symlinks, where ``stat`` is None.
    """

    type: EntryType
    stat: os.stat_result | None = None
    lstat: os.stat_result | None = None


@dataclass(frozen=True)
class ScanEntry:
    name: str
    path: str
    stat: EntryStat


@dataclass(frozen=True)
class Preview:
    format: PreviewFormat
    content: str


@dataclass(frozen=True)
class BaseCandidate:
    """Fields common to every completion candidate.

    ``filter_text`` is the raw entry name so a trailing slash on the label
    does not take part in filtering.
    """

    kind: ClassVar[CandidateKind]

    label: str
    insert_text: str
    filter_text: str
    path: str
    stat: EntryStat
    preview: Preview | None = None


@dataclass(frozen=True)
class FileCandidate(BaseCandidate):
    kind: ClassVar[CandidateKind] = CandidateKind.FILE


@dataclass(frozen=True)
class DirectoryCandidate(BaseCandidate):
    kind: ClassVar[CandidateKind] = CandidateKind.FOLDER

    # Bare name for hosts that match on ``word``; unset with trailing_slash.
    word: str | None = None


Candidate = FileCandidate | DirectoryCandidate

ResolvedDirectory = str
