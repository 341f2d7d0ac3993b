"""Settings loading and validation.

This module provides a minimal, type-safe configuration loader for the project.

Design principles:
- Fail-fast: missing required fields raise a readable error that includes field path
- No side effects: this module only parses/validates configuration; nothing is
  resolved on disk or executed here
- Explicit values: the returned Settings object is passed into the pipeline,
  there is no process-wide mutable configuration
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Sequence

import yaml

DEFAULT_ENTRY_FILENAME = "config.py"
DEFAULT_EXECUTOR = "exec"
DEFAULT_TEMPLATE = '''"""Configuration module: $name.

Created $created under $path.
"""
'''


class SettingsError(ValueError):
    """Raised when settings are missing or invalid."""


@dataclass(frozen=True)
class LoaderSettings:
    base_directory: str
    modules: list[str]
    module_configs: list[Any] = field(default_factory=list)
    timing: bool = False
    entry_filename: str = DEFAULT_ENTRY_FILENAME
    executor: str = DEFAULT_EXECUTOR


@dataclass(frozen=True)
class ObservabilitySettings:
    log_level: str
    trace_enabled: bool
    trace_file: str
    log_file: str | None = None


@dataclass(frozen=True)
class ScaffoldSettings:
    template: str = DEFAULT_TEMPLATE


@dataclass(frozen=True)
class Settings:
    loader: LoaderSettings
    observability: ObservabilitySettings
    scaffold: ScaffoldSettings


def _require_section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key)
    if value is None or not isinstance(value, Mapping):
        raise SettingsError(f"Missing required section: {key}")
    return value


def _optional_section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise SettingsError(f"Invalid section type: {key}")
    return value


def _require(raw: Mapping[str, Any], key: str, path: str) -> Any:
    if key not in raw:
        raise SettingsError(f"Missing required field: {path}")
    return raw[key]


def _as_str(value: Any, path: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise SettingsError(f"Invalid value for {path}: expected non-empty string")
    return value


def _as_optional_str(value: Any, path: str) -> str | None:
    if value is None:
        return None
    return _as_str(value, path)


def _as_bool(value: Any, path: str) -> bool:
    if not isinstance(value, bool):
        raise SettingsError(f"Invalid value for {path}: expected bool")
    return value


def _as_list(value: Any, path: str) -> list[Any]:
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
        raise SettingsError(f"Invalid value for {path}: expected list")
    return list(value)


def _as_str_list(value: Any, path: str) -> list[str]:
    out: list[str] = []
    for i, item in enumerate(_as_list(value, path)):
        if not isinstance(item, str):
            raise SettingsError(f"Invalid value for {path}[{i}]: expected str")
        out.append(item)
    return out


def _as_filename(value: Any, path: str) -> str:
    name = _as_str(value, path)
    if Path(name).name != name:
        raise SettingsError(f"Invalid value for {path}: expected a bare file name")
    return name


def validate_settings(settings: Settings) -> None:
    """Validate required fields and basic invariants."""

    if not settings.loader.base_directory:
        raise SettingsError("Missing required field: loader.base_directory")
    if not settings.loader.entry_filename:
        raise SettingsError("Missing required field: loader.entry_filename")
    if not settings.loader.executor:
        raise SettingsError("Missing required field: loader.executor")
    if not settings.observability.log_level:
        raise SettingsError("Missing required field: observability.log_level")


def load_settings(path: str | Path) -> Settings:
    """Load settings from a YAML file."""

    settings_path = Path(path)
    if not settings_path.exists():
        raise SettingsError(f"Settings file not found: {settings_path}")

    try:
        raw_obj = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in settings file: {settings_path}") from e

    if raw_obj is None or not isinstance(raw_obj, Mapping):
        raise SettingsError(f"Invalid settings root: expected mapping in {settings_path}")

    loader_raw = _require_section(raw_obj, "loader")
    observability_raw = _require_section(raw_obj, "observability")
    scaffold_raw = _optional_section(raw_obj, "scaffold")

    loader = LoaderSettings(
        base_directory=_as_str(
            _require(loader_raw, "base_directory", "loader.base_directory"),
            "loader.base_directory",
        ),
        modules=_as_str_list(
            _require(loader_raw, "modules", "loader.modules"),
            "loader.modules",
        ),
        module_configs=_as_list(
            loader_raw.get("module_configs") or [],
            "loader.module_configs",
        ),
        timing=_as_bool(loader_raw.get("timing", False), "loader.timing"),
        entry_filename=_as_filename(
            loader_raw.get("entry_filename", DEFAULT_ENTRY_FILENAME),
            "loader.entry_filename",
        ),
        executor=_as_str(
            loader_raw.get("executor", DEFAULT_EXECUTOR),
            "loader.executor",
        ).strip().lower(),
    )

    observability = ObservabilitySettings(
        log_level=_as_str(
            _require(observability_raw, "log_level", "observability.log_level"),
            "observability.log_level",
        ),
        trace_enabled=_as_bool(
            _require(observability_raw, "trace_enabled", "observability.trace_enabled"),
            "observability.trace_enabled",
        ),
        trace_file=_as_str(
            _require(observability_raw, "trace_file", "observability.trace_file"),
            "observability.trace_file",
        ),
        log_file=_as_optional_str(
            observability_raw.get("log_file"),
            "observability.log_file",
        ),
    )

    scaffold = ScaffoldSettings(
        template=_as_str(
            scaffold_raw.get("template", DEFAULT_TEMPLATE),
            "scaffold.template",
        ),
    )

    settings = Settings(
        loader=loader,
        observability=observability,
        scaffold=scaffold,
    )
    validate_settings(settings)
    return settings
