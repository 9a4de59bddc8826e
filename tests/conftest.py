from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from better_path.core.types import RequestContext


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A small project tree: src/ with a file, a subdirectory and a dotfile."""
    root = tmp_path / "proj"
    src = root / "src"
    (src / "lib").mkdir(parents=True)
    (src / "main.go").write_text("package main\n\nfunc main() {}\n")
    (src / ".hidden").write_text("secret\n")
    return root


@pytest.fixture
def make_context() -> Callable[..., RequestContext]:
    def _make(text: str, **kwargs) -> RequestContext:
        return RequestContext(cursor_line_prefix=text, **kwargs)

    return _make
