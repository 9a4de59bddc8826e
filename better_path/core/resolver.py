"""Turn a typed directory prefix into the directories to scan."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
import logging
import os
from pathlib import Path

from better_path.core.types import EditingMode, RequestContext, ResolvedDirectory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixedBaseDirs:
    """A constant list of base directories."""

    dirs: tuple[str, ...]


@dataclass(frozen=True)
class DynamicBaseDirs:
    """Base directories computed per request.

    ``fn`` may return a single string (older configurations) or a list.
    """

    fn: Callable[[RequestContext], str | list[str]]


BaseDirSource = FixedBaseDirs | DynamicBaseDirs


def default_base_dirs(context: RequestContext) -> list[str]:
    """Working directory first, then the directory of the current buffer."""
    cwd = os.getcwd()
    if context.buffer_path:
        buffer_dir = os.path.dirname(os.path.abspath(context.buffer_path))
    else:
        buffer_dir = cwd
    return [cwd, buffer_dir]


def uniquify(items: Iterable[str]) -> list[str]:
    """Drop duplicates, keeping the first occurrence of each item."""
    return list(dict.fromkeys(items))


def base_dirs_for(source: BaseDirSource, context: RequestContext) -> list[str]:
    if isinstance(source, FixedBaseDirs):
        return list(source.dirs)
    result = source.fn(context)
    if isinstance(result, str):
        return [result]
    return list(result)


def _target_path(dirname: str, base: str) -> Path:
    if dirname.startswith("~"):
        return Path(os.path.expanduser("~") + dirname[1:])
    if dirname == "/":
        return Path("/")
    if dirname.startswith("/"):
        return Path("/", dirname.lstrip("/"))
    return Path(base, dirname)


def resolve_directory(dirname: str, base: str) -> ResolvedDirectory:
    """Resolve ``dirname`` against ``base`` to an absolute, real path.

    Home-relative and absolute dirnames ignore ``base``. Raises OSError, or
    RuntimeError on a symlink loop, when the target does not resolve.
    """
    dirname = dirname.replace("\\", "/")
    return str(_target_path(dirname, base).resolve(strict=True))


def resolve_directories(
    dirname: str,
    context: RequestContext,
    source: BaseDirSource,
) -> list[ResolvedDirectory]:
    """Resolve ``dirname`` against every base directory of the request.

    Args:
        dirname: Directory part of the typed path, without the trailing
            separator. Empty means the base directory itself, ``/`` the
            filesystem root.
        context: The completion request.
        source: Where base directories come from.

    Returns:
        De-duplicated resolved directories in base-directory order. Bases
        whose target does not resolve are left out.
    """
    if context.mode == EditingMode.COMMAND:
        bases = [os.getcwd()]
    else:
        bases = uniquify(base_dirs_for(source, context))

    resolved: list[ResolvedDirectory] = []
    for base in bases:
        try:
            resolved.append(resolve_directory(dirname, base))
        except (OSError, RuntimeError) as e:
            logger.debug(f"Dropping base directory {base!r} for {dirname!r}: {e}")
    return uniquify(resolved)
