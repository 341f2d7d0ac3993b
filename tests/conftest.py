"""Shared fixtures: on-disk module trees and captured loader diagnostics."""

from __future__ import annotations

import logging
import textwrap
from pathlib import Path
from typing import Callable

import pytest

from src.libs.executor import GLOBAL_NAMESPACE
from src.observability.logger import LOGGER_NAME


@pytest.fixture
def make_module(tmp_path: Path) -> Callable[..., Path]:
    """Create ``<tmp>/modules/<name>/config.py`` (or just the directory)."""

    base = tmp_path / "modules"
    base.mkdir(exist_ok=True)

    def _make(name: str, body: str | None = "", entry_filename: str = "config.py") -> Path:
        module_dir = base / name
        module_dir.mkdir(parents=True, exist_ok=True)
        if body is None:
            return module_dir
        entry = module_dir / entry_filename
        entry.write_text(textwrap.dedent(body), encoding="utf-8")
        return entry

    _make.base = base  # type: ignore[attr-defined]
    return _make


class RecordingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def modconf_logs():
    """Collect records from the project logger, which does not propagate to root."""

    logger = logging.getLogger(LOGGER_NAME)
    previous = logger.level
    handler = RecordingHandler()
    logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        logger.setLevel(previous)


@pytest.fixture
def global_namespace():
    """The default executor's process-wide namespace, restored after the test."""

    snapshot = dict(GLOBAL_NAMESPACE)
    try:
        yield GLOBAL_NAMESPACE
    finally:
        GLOBAL_NAMESPACE.clear()
        GLOBAL_NAMESPACE.update(snapshot)
