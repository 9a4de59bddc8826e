from __future__ import annotations

from collections.abc import Iterable

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from better_path.core.matcher import match_path_prefix
from better_path.core.source import PathCompletionSource
from better_path.core.types import EditingMode, RequestContext


class PromptToolkitPathCompleter(Completer):
    """Adapter to serve a PathCompletionSource through prompt_toolkit."""

    def __init__(
        self,
        source: PathCompletionSource | None = None,
        mode: EditingMode = EditingMode.NORMAL,
        buffer_path: str | None = None,
    ) -> None:
        self.source = source or PathCompletionSource()
        self.mode = mode
        self.buffer_path = buffer_path

    def get_completions(
        self, document: Document, complete_event: CompleteEvent
    ) -> Iterable[Completion]:
        line_prefix = document.current_line_before_cursor
        match = match_path_prefix(line_prefix)
        if match is None:
            return

        context = RequestContext(
            cursor_line_prefix=line_prefix,
            mode=self.mode,
            buffer_path=self.buffer_path,
        )
        candidates = self.source.complete(context) or []

        # prompt_toolkit filters nothing itself; only offer entries that
        # extend what has been typed after the last separator.
        start_position = -len(match.partial)
        for candidate in candidates:
            if not candidate.filter_text.startswith(match.partial):
                continue
            yield Completion(
                text=candidate.insert_text,
                start_position=start_position,
                display=candidate.label,
                display_meta=candidate.kind.value,
            )
