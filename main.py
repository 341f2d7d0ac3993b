"""Application entrypoint.

Subcommands:
- load: resolve, locate and load the configured modules
- new:  scaffold a module directory from the configured template
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from src.core.settings import SettingsError, load_settings
from src.libs.executor import ExecutorFactory
from src.modules import ModulePipeline, create_module
from src.observability.logger import get_logger

DEFAULT_SETTINGS = "config/settings.yaml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Load configuration modules from disk")
    parser.add_argument("--settings", default=DEFAULT_SETTINGS, help="Settings file path")
    sub = parser.add_subparsers(dest="command", required=True)

    load = sub.add_parser("load", help="Load the configured modules")
    load.add_argument("--timing", action="store_true", help="Report per-file load time")
    load.add_argument(
        "--executor",
        default=None,
        help="Override loader.executor (" + ", ".join(ExecutorFactory.list_providers()) + ")",
    )

    new = sub.add_parser("new", help="Create a module from the template")
    new.add_argument("path", help="Directory relative to the base directory")
    new.add_argument("name", help="Module name")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logger = get_logger()

    try:
        settings = load_settings(args.settings)
    except SettingsError as e:
        logger.error(str(e))
        return 1

    logger = get_logger(
        level=settings.observability.log_level,
        log_file=settings.observability.log_file,
    )

    if args.command == "new":
        try:
            entry_file = create_module(
                settings.loader.base_directory,
                args.path,
                args.name,
                template=settings.scaffold.template,
                entry_filename=settings.loader.entry_filename,
            )
        except (FileExistsError, ValueError) as e:
            logger.error(str(e))
            return 1
        print(entry_file)
        return 0

    if args.executor:
        settings = replace(
            settings, loader=replace(settings.loader, executor=args.executor.strip().lower())
        )

    try:
        pipeline = ModulePipeline(settings)
    except ValueError as e:
        logger.error(str(e))
        return 1

    # Timing lines are INFO records; they must survive a stricter configured level.
    if (args.timing or settings.loader.timing) and not logger.isEnabledFor(logging.INFO):
        logger.setLevel(logging.INFO)

    result = pipeline.run(timing=True if args.timing else None)
    logger.debug("Run result: %s", result)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
