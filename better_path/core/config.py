"""Completion options.

Options are validated once, when the completion source is created. A value
of the wrong type is a ``ConfigurationError``; nothing is coerced.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from better_path.core.errors import ConfigurationError
from better_path.core.resolver import (
    BaseDirSource,
    DynamicBaseDirs,
    FixedBaseDirs,
    default_base_dirs,
)

ENV_PREFIX = "BETTER_PATH_"


class PathCompletionOptions(BaseModel):
    """Options recognized by the path completion source.

    Attributes:
        trailing_slash: Keep the trailing slash when a directory is
            accepted; when False directory candidates also carry a bare
            ``word``.
        label_trailing_slash: Show a trailing slash on directory labels.
        show_hidden_files_by_default: List dot-entries without the user
            typing a leading dot.
        get_cwd: Base directories relative paths are resolved against. A
            callable taking the request and returning a string or a list of
            strings, or a fixed string or list.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="forbid")

    trailing_slash: bool = False
    label_trailing_slash: bool = True
    show_hidden_files_by_default: bool = False
    get_cwd: BaseDirSource = Field(
        default_factory=lambda: DynamicBaseDirs(default_base_dirs)
    )

    @field_validator("get_cwd", mode="plain")
    @classmethod
    def _normalize_base_dir_source(cls, value: Any) -> BaseDirSource:
        if isinstance(value, (FixedBaseDirs, DynamicBaseDirs)):
            return value
        if isinstance(value, str):
            return FixedBaseDirs((value,))
        if isinstance(value, (list, tuple)):
            if not all(isinstance(v, str) for v in value):
                raise ValueError("get_cwd list must contain only strings")
            return FixedBaseDirs(tuple(value))
        if callable(value):
            return DynamicBaseDirs(value)
        raise ValueError(
            f"get_cwd must be a callable, a string or a list of strings, "
            f"got {type(value).__name__}"
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> PathCompletionOptions:
        """Validate host-supplied option values."""
        try:
            return cls.model_validate(dict(values))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid path completion options: {e}") from e


class PathCompletionSettings(BaseSettings):
    """Boolean options read from ``BETTER_PATH_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    trailing_slash: bool = False
    label_trailing_slash: bool = True
    show_hidden_files_by_default: bool = False


def load_options(**overrides: Any) -> PathCompletionOptions:
    """Build options from the environment, with explicit values on top."""
    try:
        settings = PathCompletionSettings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid {ENV_PREFIX}* environment: {e}") from e
    values: dict[str, Any] = settings.model_dump()
    values.update(overrides)
    return PathCompletionOptions.from_mapping(values)
