"""Module identifiers -> existing module directories."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

from src.core.trace.trace_context import TraceContext


def expand_base_directory(base_directory: str | Path) -> Path:
    """Apply home-directory expansion to the base directory."""

    return Path(base_directory).expanduser()


def resolve_module_directories(
    base_directory: str | Path,
    module_names: Iterable[Any],
    trace: TraceContext | None = None,
) -> list[Path]:
    """Return ``base/<name>`` for every name whose directory exists.

    Names without a directory are dropped without any diagnostic; an
    unreadable or missing base directory simply yields an empty list.
    """

    base = expand_base_directory(base_directory)
    requested: list[str] = []
    directories: list[Path] = []
    for name in module_names:
        name_str = str(name)
        requested.append(name_str)
        if not name_str:
            continue
        candidate = base / name_str
        if candidate.is_dir():
            directories.append(candidate)

    if trace is not None:
        trace.record_stage(
            "resolve",
            {
                "base_directory": str(base),
                "requested": requested,
                "resolved": [str(d) for d in directories],
            },
        )
    return directories
