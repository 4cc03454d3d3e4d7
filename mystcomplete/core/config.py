"""Completion configuration.

Values come from, in increasing priority: defaults, a TOML file in the
workspace root, ``MYSTCOMPLETE_*`` environment variables and explicit
overrides. The engine takes one snapshot at construction time.

Example ``mystcomplete.toml``:

    [completion]
    enabled = true
    root = "site"
    respect_search_exclude = true

    [completion.search_exclude]
    "**/_build" = true

    [completion.math_macros]
    "\\\\RR" = "\\\\mathbb{R}"
    "\\\\norm" = "\\\\left\\\\lVert #1 \\\\right\\\\rVert"
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
import json
import logging
import tomllib

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from mystcomplete.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = ("mystcomplete.toml", ".mystcomplete.toml")
CONFIG_SECTION = "completion"

ALWAYS_EXCLUDE: tuple[str, ...] = (
    "**/node_modules",
    "**/bower_components",
    "**/*.code-search",
    "**/.git",
)


class TocSettings(BaseModel):
    """Table-of-contents options consumed by the outline service."""

    omitted_from_toc: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Workspace-relative document path -> heading texts to omit",
    )


class CompletionSettings(BaseModel):
    """Configuration snapshot for a completion engine."""

    enabled: bool = Field(
        default=False,
        description="Enable image, heading-link and file-path completion",
    )
    root: str = Field(
        default="",
        description="Directory used as the base of rooted paths such as '/img/a.png'",
    )
    respect_search_exclude: bool = Field(
        default=True,
        description="Exclude the patterns of search_exclude from path completion",
    )
    search_exclude: dict[str, bool] = Field(
        default_factory=dict,
        description="Glob pattern -> enabled flag",
    )
    math_macros: dict[str, str] = Field(
        default_factory=dict,
        description="Math command (with leading backslash) -> expansion",
    )
    toc: TocSettings = Field(default_factory=TocSettings)


class CompletionEnvSettings(BaseSettings):
    """Settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="MYSTCOMPLETE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    enabled: bool | None = Field(
        default=None, description="Enable completion (MYSTCOMPLETE_ENABLED)"
    )
    root: str | None = Field(
        default=None, description="Project root override (MYSTCOMPLETE_ROOT)"
    )
    respect_search_exclude: bool | None = Field(
        default=None,
        description="Respect search excludes (MYSTCOMPLETE_RESPECT_SEARCH_EXCLUDE)",
    )
    search_exclude: dict[str, bool] | None = Field(
        default=None,
        description="Exclude patterns as JSON (MYSTCOMPLETE_SEARCH_EXCLUDE)",
    )
    math_macros: dict[str, str] | None = Field(
        default=None, description="Math macros as JSON (MYSTCOMPLETE_MATH_MACROS)"
    )


def find_config_file(workspace_root: Path | None) -> Path | None:
    if workspace_root is None:
        return None
    for candidate in CONFIG_FILENAMES:
        candidate_path = workspace_root / candidate
        if candidate_path.is_file():
            return candidate_path
    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """Return the ``[completion]`` table of a TOML configuration file.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(path, str(exc)) from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(path, str(exc)) from exc

    section = data.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigError(path, f"[{CONFIG_SECTION}] must be a table")
    return section


def _coerce_mapping(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            logger.warning("Ignoring malformed JSON setting: %s", value)
            return None
    return value


def _apply_overrides(values: dict[str, Any], overrides: dict[str, Any] | None) -> None:
    if not overrides:
        return
    for key, value in overrides.items():
        if value is None:
            continue
        if key in {"search_exclude", "math_macros"}:
            value = _coerce_mapping(value)
            if value is None:
                continue
        values[key] = value


def load_settings(
    *,
    workspace_root: Path | None = None,
    config_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> CompletionSettings:
    """Load settings following priority: overrides > env > config file > defaults.

    A broken configuration file is reported and ignored so that completion
    keeps working with defaults.
    """
    selected_path = config_path or find_config_file(workspace_root)

    values: dict[str, Any] = {}
    if selected_path is not None:
        try:
            values.update(read_config_file(selected_path))
        except ConfigError as exc:
            logger.warning("%s; using defaults", exc)

    try:
        env_overrides = CompletionEnvSettings().model_dump(exclude_none=True)
    except ValueError as exc:
        # pydantic-settings raises for undecodable JSON in dict-typed variables
        logger.warning("Ignoring MYSTCOMPLETE_* environment settings: %s", exc)
        env_overrides = {}
    _apply_overrides(values, env_overrides)
    _apply_overrides(values, overrides)

    try:
        return CompletionSettings.model_validate(values)
    except ValidationError as exc:
        logger.warning("Invalid completion settings, using defaults: %s", exc)
        return CompletionSettings()


def build_exclude_patterns(settings: CompletionSettings) -> tuple[str, ...]:
    """Return the exclude globs for path enumeration, deduplicated in order."""
    patterns = dict.fromkeys(ALWAYS_EXCLUDE)
    if settings.respect_search_exclude:
        for pattern, enabled in settings.search_exclude.items():
            if enabled:
                patterns.setdefault(pattern)
    return tuple(patterns)
