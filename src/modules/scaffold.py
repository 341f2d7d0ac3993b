"""Create new module directories from a template.

The result is ``<base>/<relative_path>/<name>/<entry_filename>``. Templates
use ``string.Template`` placeholders: ``$name``, ``$path`` and ``$created``.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from string import Template

from src.core.settings import DEFAULT_ENTRY_FILENAME, DEFAULT_TEMPLATE
from src.modules.resolver import expand_base_directory
from src.observability.logger import get_logger

logger = get_logger()


def render_template(template: str, name: str, path: str) -> str:
    return Template(template).safe_substitute(
        name=name,
        path=path,
        created=date.today().isoformat(),
    )


def create_module(
    base_directory: str | Path,
    relative_path: str,
    name: str,
    template: str = DEFAULT_TEMPLATE,
    entry_filename: str = DEFAULT_ENTRY_FILENAME,
) -> Path:
    """Write a new module entry file and return its path.

    Raises:
        ValueError: ``name`` is empty.
        FileExistsError: the entry file already exists.
    """

    if not name or not name.strip():
        raise ValueError("Module name cannot be empty")

    module_dir = expand_base_directory(base_directory) / relative_path / name.strip()
    entry_file = module_dir / entry_filename
    if entry_file.exists():
        raise FileExistsError(f"Module already exists: {entry_file}")

    module_dir.mkdir(parents=True, exist_ok=True)
    entry_file.write_text(
        render_template(template, name.strip(), relative_path),
        encoding="utf-8",
    )
    logger.info("Created module %s at %s", name.strip(), entry_file)
    return entry_file
