"""Sequential execution of located entry files.

Files are executed one at a time in the order given. A file that vanished
between discovery and load is reported and skipped; an exception raised by
a file's own code propagates to the caller and stops the batch. Effects of
files already executed are not rolled back.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Callable, Iterable, Union

from src.core.trace.trace_context import TraceContext
from src.core.types import STATUS_LOADED, STATUS_MISSING, FileLoadRecord
from src.libs.executor import GLOBAL_NAMESPACE, BaseExecutor, ExecExecutor
from src.observability.logger import get_logger

logger = get_logger()

Executor = Union[BaseExecutor, Callable[[Path], Any]]


def load_config_files(
    files: Iterable[str | Path],
    timing: bool = False,
    executor: Executor | None = None,
    trace: TraceContext | None = None,
) -> list[Path]:
    """Execute each file in order and return the files attempted.

    Args:
        files: Entry files, usually the output of ``locate_config_files``.
        timing: Measure each execution and log
            ``Loaded file: <path>, Load time: <seconds> seconds``.
        executor: Callable run once per file. Defaults to an ExecExecutor bound
            to the process-wide ``GLOBAL_NAMESPACE``.
        trace: Optional trace; receives a ``load`` stage listing the files
            processed, also when a file raises.

    Returns:
        Every input path, in input order, including ones found missing.
    """

    run = executor if executor is not None else ExecExecutor(namespace=GLOBAL_NAMESPACE)
    processed: list[Path] = []
    records: list[FileLoadRecord] = []

    try:
        for file_path in files:
            path = Path(file_path)
            processed.append(path)

            if not path.is_file():
                logger.warning("File not found: %s", path)
                records.append(FileLoadRecord(path=str(path), status=STATUS_MISSING))
                continue

            elapsed: float | None = None
            if timing:
                start = time.perf_counter()
                run(path)
                elapsed = time.perf_counter() - start
                logger.info("Loaded file: %s, Load time: %.6f seconds", path, elapsed)
            else:
                run(path)
            records.append(
                FileLoadRecord(path=str(path), status=STATUS_LOADED, elapsed=elapsed)
            )
    finally:
        # Partial when a file raised: only the files that finished are listed.
        if trace is not None:
            trace.record_stage(
                "load",
                {"timing": timing, "files": [r.to_dict() for r in records]},
            )
    return processed
