"""Tests for core data types."""

from __future__ import annotations

import pytest

from src.core.types import STATUS_LOADED, STATUS_MISSING, FileLoadRecord


def test_loaded_record() -> None:
    record = FileLoadRecord(path="/m/a/config.py", status=STATUS_LOADED, elapsed=0.001)

    assert record.loaded is True
    assert record.to_dict() == {"path": "/m/a/config.py", "status": "loaded", "elapsed": 0.001}


def test_missing_record_has_no_elapsed() -> None:
    record = FileLoadRecord(path="/m/a/config.py", status=STATUS_MISSING)

    assert record.loaded is False
    assert record.elapsed is None


def test_from_dict_restores_record() -> None:
    data = {"path": "/m/a/config.py", "status": "loaded", "elapsed": 1}

    record = FileLoadRecord.from_dict(data)

    assert record == FileLoadRecord(path="/m/a/config.py", status="loaded", elapsed=1.0)


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"path": "", "status": "loaded"}, "path must be a non-empty string"),
        ({"path": "/x", "status": "failed"}, "status must be one of"),
        ({"path": "/x", "status": "loaded", "elapsed": -1.0}, "non-negative"),
        ({"path": "/x", "status": "loaded", "elapsed": True}, "number of seconds"),
    ],
)
def test_invalid_records_rejected(kwargs, message) -> None:
    with pytest.raises(ValueError, match=message):
        FileLoadRecord(**kwargs)
