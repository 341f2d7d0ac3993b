"""
Core Layer - shared contracts.

This package contains:
- Configuration management (settings.py)
- Core data types (types.py) - per-file load records shared by loader and trace
- Trace collection
"""

from src.core.types import FileLoadRecord

__all__ = ["FileLoadRecord"]
