"""Module loading stage exports."""

from src.modules.loader import load_config_files
from src.modules.locator import locate_config_files
from src.modules.pipeline import ModulePipeline, load_modules
from src.modules.resolver import resolve_module_directories
from src.modules.scaffold import create_module

__all__ = [
    "ModulePipeline",
    "create_module",
    "load_config_files",
    "load_modules",
    "locate_config_files",
    "resolve_module_directories",
]
