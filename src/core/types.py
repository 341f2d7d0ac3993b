"""Core data types shared by the loader stages and tracing.

Rules:
- status is one of LOAD_STATUSES
- elapsed is only set for files that were timed
- types are JSON-serializable via to_dict()/from_dict()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

STATUS_LOADED = "loaded"
STATUS_MISSING = "missing"
LOAD_STATUSES = (STATUS_LOADED, STATUS_MISSING)


def _validate_status(status: str) -> None:
    if status not in LOAD_STATUSES:
        raise ValueError(
            f"status must be one of {', '.join(LOAD_STATUSES)}, got '{status}'"
        )


def _validate_elapsed(elapsed: float | None) -> None:
    if elapsed is None:
        return
    if isinstance(elapsed, bool) or not isinstance(elapsed, (int, float)):
        raise ValueError("elapsed must be a number of seconds")
    if elapsed < 0:
        raise ValueError("elapsed must be non-negative")


@dataclass
class FileLoadRecord:
    """Outcome of one entry file handed to the loader."""

    path: str
    status: str
    elapsed: float | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.path, str) or not self.path.strip():
            raise ValueError("path must be a non-empty string")
        _validate_status(self.status)
        _validate_elapsed(self.elapsed)

    @property
    def loaded(self) -> bool:
        return self.status == STATUS_LOADED

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "status": self.status,
            "elapsed": self.elapsed,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FileLoadRecord":
        elapsed = data.get("elapsed")
        return cls(
            path=str(data.get("path", "")),
            status=str(data.get("status", "")),
            elapsed=float(elapsed) if elapsed is not None else None,
        )
