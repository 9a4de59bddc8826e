from __future__ import annotations

from pathlib import Path

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document
import pytest

from better_path.cli.autocompletion import PromptToolkitPathCompleter
from better_path.core.source import PathCompletionSource


@pytest.fixture
def completer(project: Path) -> PromptToolkitPathCompleter:
    return PromptToolkitPathCompleter(PathCompletionSource({"get_cwd": str(project)}))


def _complete(completer: PromptToolkitPathCompleter, text: str):
    document = Document(text, cursor_position=len(text))
    return list(completer.get_completions(document, CompleteEvent()))


class TestPromptToolkitPathCompleter:
    def test_no_path_no_completions(self, completer) -> None:
        assert _complete(completer, "hello") == []

    def test_lists_directory(self, completer) -> None:
        completions = _complete(completer, "open src/")
        by_text = {c.text: c for c in completions}
        assert set(by_text) == {"main.go", "lib/"}
        assert by_text["lib/"].display_text == "lib/"
        assert by_text["lib/"].display_meta_text == "folder"
        assert by_text["main.go"].display_meta_text == "file"
        assert all(c.start_position == 0 for c in completions)

    def test_filters_on_partial_name(self, completer) -> None:
        completions = _complete(completer, "open src/ma")
        assert [(c.text, c.start_position) for c in completions] == [("main.go", -2)]

    def test_dot_shows_hidden(self, completer) -> None:
        completions = _complete(completer, "cat src/.")
        assert [c.text for c in completions] == [".hidden"]

    def test_uses_current_line_only(self, completer) -> None:
        assert [c.text for c in _complete(completer, "first line\nopen src/l")] == ["lib/"]
