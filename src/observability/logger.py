"""Logging setup for the module loader.

All diagnostics (missing files, per-file load timings, run summaries) go
through the single project logger returned here. It always writes to stderr
and can additionally append to a log file configured in settings.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "modconf"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            if Path(handler.baseFilename) == path.resolve():
                return True
    return False


def get_logger(
    name: str = LOGGER_NAME,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Create (or return) the configured project logger.

    Args:
        name: Logger name.
        level: Optional log level string (e.g. "INFO"). If omitted, keeps existing.
        log_file: Optional path; when given, records are also appended there.

    Returns:
        Logger writing to stderr (and ``log_file`` if set).
    """

    logger = logging.getLogger(name)
    logger.propagate = False

    if level is not None:
        logger.setLevel(level.upper())
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)

    formatter = logging.Formatter(fmt=LOG_FORMAT)

    # FileHandler subclasses StreamHandler; only count real stream handlers here.
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if log_file:
        path = Path(log_file).expanduser()
        if not _has_file_handler(logger, path):
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
