"""Module loading orchestration: resolve -> locate -> load."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

from src.core.settings import DEFAULT_ENTRY_FILENAME, Settings
from src.core.trace.trace_context import TraceContext
from src.libs.executor import ExecutorFactory
from src.modules.loader import Executor, load_config_files
from src.modules.locator import locate_config_files
from src.modules.resolver import expand_base_directory, resolve_module_directories
from src.observability.logger import get_logger

logger = get_logger()


def load_modules(
    base_directory: str | Path,
    module_list: Iterable[Any],
    timing: bool = False,
    executor: Executor | None = None,
    *,
    entry_filename: str = DEFAULT_ENTRY_FILENAME,
    trace: TraceContext | None = None,
) -> list[Path]:
    """Resolve, locate and load the given modules; returns the files processed."""

    directories = resolve_module_directories(base_directory, module_list, trace=trace)
    files = locate_config_files(directories, entry_filename, trace=trace)
    return load_config_files(files, timing, executor=executor, trace=trace)


class ModulePipeline:
    """Runs ``load_modules`` for a Settings object and reports the outcome."""

    def __init__(self, settings: Settings, executor: Executor | None = None):
        self.settings = settings
        self.executor = executor if executor is not None else ExecutorFactory.create(settings)

    def _new_trace(self) -> TraceContext:
        observability = self.settings.observability
        return TraceContext(
            base_directory=self.settings.loader.base_directory,
            modules=list(self.settings.loader.modules),
            log_file=observability.trace_file if observability.trace_enabled else None,
        )

    def run(
        self, timing: bool | None = None, trace: TraceContext | None = None
    ) -> dict[str, object]:
        loader_settings = self.settings.loader
        use_timing = loader_settings.timing if timing is None else timing
        trace_ctx = trace or self._new_trace()

        base = expand_base_directory(loader_settings.base_directory)
        if not base.is_dir():
            logger.warning("Base directory not found: %s", base)

        try:
            files = load_modules(
                base,
                loader_settings.modules,
                use_timing,
                executor=self.executor,
                entry_filename=loader_settings.entry_filename,
                trace=trace_ctx,
            )
        except Exception as e:  # noqa: BLE001
            trace_ctx.record_stage(
                "load_error", {"error": str(e), "type": type(e).__name__}
            )
            trace_ctx.finish()
            raise

        loaded = {str(r.path) for r in trace_ctx.load_records() if r.loaded}
        skipped = [
            name
            for name in loader_settings.modules
            if str(base / name / loader_settings.entry_filename) not in loaded
        ]
        logger.info(
            "Loaded %d/%d modules from %s",
            len(loader_settings.modules) - len(skipped),
            len(loader_settings.modules),
            base,
        )
        if skipped:
            logger.warning("Modules not loaded: %s", ", ".join(skipped))

        trace_ctx.record_stage("summary", {"loaded": sorted(loaded), "skipped": skipped})
        trace_ctx.finish()
        return {
            "status": "success",
            "files": [str(f) for f in files],
            "skipped": skipped,
        }
