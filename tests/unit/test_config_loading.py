"""Tests for settings loading and validation."""

from __future__ import annotations

from pathlib import Path
import textwrap

import pytest

from src.core.settings import (
    DEFAULT_ENTRY_FILENAME,
    DEFAULT_EXECUTOR,
    DEFAULT_TEMPLATE,
    SettingsError,
    load_settings,
)


def _write_yaml(path: Path, content: str) -> None:
    path.write_text(textwrap.dedent(content).strip() + "\n", encoding="utf-8")


def test_load_settings_success(tmp_path: Path) -> None:
    config = """
    loader:
      base_directory: ~/.config/modconf/modules
      modules:
        - alpha
        - beta
      module_configs:
        - name: alpha
          enabled: true
      timing: true
      entry_filename: init.py
      executor: Import
    observability:
      log_level: DEBUG
      trace_enabled: true
      trace_file: ./logs/load_traces.jsonl
      log_file: ./logs/modconf.log
    scaffold:
      template: "# $name"
    """
    settings_path = tmp_path / "settings.yaml"
    _write_yaml(settings_path, config)

    settings = load_settings(settings_path)

    assert settings.loader.base_directory == "~/.config/modconf/modules"
    assert settings.loader.modules == ["alpha", "beta"]
    assert settings.loader.module_configs == [{"name": "alpha", "enabled": True}]
    assert settings.loader.timing is True
    assert settings.loader.entry_filename == "init.py"
    assert settings.loader.executor == "import"
    assert settings.observability.log_level == "DEBUG"
    assert settings.observability.trace_enabled is True
    assert settings.observability.log_file == "./logs/modconf.log"
    assert settings.scaffold.template == "# $name"


def test_optional_fields_use_defaults(tmp_path: Path) -> None:
    config = """
    loader:
      base_directory: /srv/modules
      modules: []
    observability:
      log_level: INFO
      trace_enabled: false
      trace_file: ./logs/load_traces.jsonl
    """
    settings_path = tmp_path / "settings.yaml"
    _write_yaml(settings_path, config)

    settings = load_settings(settings_path)

    assert settings.loader.modules == []
    assert settings.loader.module_configs == []
    assert settings.loader.timing is False
    assert settings.loader.entry_filename == DEFAULT_ENTRY_FILENAME
    assert settings.loader.executor == DEFAULT_EXECUTOR
    assert settings.observability.log_file is None
    assert settings.scaffold.template == DEFAULT_TEMPLATE


def test_missing_required_field_raises_error(tmp_path: Path) -> None:
    config = """
    loader:
      modules:
        - alpha
    observability:
      log_level: INFO
      trace_enabled: false
      trace_file: ./logs/load_traces.jsonl
    """
    settings_path = tmp_path / "settings.yaml"
    _write_yaml(settings_path, config)

    with pytest.raises(SettingsError, match="loader.base_directory"):
        load_settings(settings_path)


def test_missing_section_raises_error(tmp_path: Path) -> None:
    config = """
    loader:
      base_directory: /srv/modules
      modules: [alpha]
    """
    settings_path = tmp_path / "settings.yaml"
    _write_yaml(settings_path, config)

    with pytest.raises(SettingsError, match="Missing required section: observability"):
        load_settings(settings_path)


def test_modules_must_be_list_of_strings(tmp_path: Path) -> None:
    config = """
    loader:
      base_directory: /srv/modules
      modules: alpha
    observability:
      log_level: INFO
      trace_enabled: false
      trace_file: ./logs/load_traces.jsonl
    """
    settings_path = tmp_path / "settings.yaml"
    _write_yaml(settings_path, config)

    with pytest.raises(SettingsError, match="loader.modules: expected list"):
        load_settings(settings_path)

    _write_yaml(
        settings_path,
        config.replace("modules: alpha", "modules: [alpha, 3]"),
    )
    with pytest.raises(SettingsError, match=r"loader.modules\[1\]"):
        load_settings(settings_path)


def test_entry_filename_must_be_bare_name(tmp_path: Path) -> None:
    config = """
    loader:
      base_directory: /srv/modules
      modules: [alpha]
      entry_filename: sub/config.py
    observability:
      log_level: INFO
      trace_enabled: false
      trace_file: ./logs/load_traces.jsonl
    """
    settings_path = tmp_path / "settings.yaml"
    _write_yaml(settings_path, config)

    with pytest.raises(SettingsError, match="loader.entry_filename"):
        load_settings(settings_path)


def test_timing_must_be_bool(tmp_path: Path) -> None:
    config = """
    loader:
      base_directory: /srv/modules
      modules: [alpha]
      timing: "yes"
    observability:
      log_level: INFO
      trace_enabled: false
      trace_file: ./logs/load_traces.jsonl
    """
    settings_path = tmp_path / "settings.yaml"
    _write_yaml(settings_path, config)

    with pytest.raises(SettingsError, match="loader.timing: expected bool"):
        load_settings(settings_path)


def test_settings_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(SettingsError, match="Settings file not found"):
        load_settings(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("loader: [unclosed\n", encoding="utf-8")

    with pytest.raises(SettingsError, match="Invalid YAML"):
        load_settings(settings_path)


def test_root_must_be_mapping(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(SettingsError, match="expected mapping"):
        load_settings(settings_path)


def test_repository_settings_file_loads() -> None:
    settings = load_settings(Path(__file__).resolve().parents[2] / "config" / "settings.yaml")

    assert settings.loader.executor == "exec"
    assert "$name" in settings.scaffold.template
