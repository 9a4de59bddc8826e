from __future__ import annotations

from better_path.cli.autocompletion.adapter import PromptToolkitPathCompleter

__all__ = ["PromptToolkitPathCompleter"]
