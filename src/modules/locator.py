"""Module directories -> existing entry files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from src.core.settings import DEFAULT_ENTRY_FILENAME
from src.core.trace.trace_context import TraceContext


def locate_config_files(
    directories: Iterable[str | Path],
    entry_filename: str = DEFAULT_ENTRY_FILENAME,
    trace: TraceContext | None = None,
) -> list[Path]:
    """Return the entry file of each directory that has one, in input order."""

    files: list[Path] = []
    for directory in directories:
        candidate = Path(directory) / entry_filename
        if candidate.is_file():
            files.append(candidate)

    if trace is not None:
        trace.record_stage(
            "locate",
            {
                "entry_filename": entry_filename,
                "located": [str(f) for f in files],
            },
        )
    return files
