from __future__ import annotations

import pytest

from attendance_tracker.core.exceptions import PersistenceError
from attendance_tracker.persistence.file_store import JsonFileStore


def test_set_get_remove(tmp_path):
    store = JsonFileStore(tmp_path / "nested" / "data")

    assert store.get_item("k") is None

    store.set_item("k", '{"a": 1}')
    assert store.get_item("k") == '{"a": 1}'
    assert (tmp_path / "nested" / "data" / "k.json").exists()

    store.set_item("k", '{"a": 2}')
    assert store.get_item("k") == '{"a": 2}'

    store.remove_item("k")
    assert store.get_item("k") is None
    store.remove_item("k")


def test_write_failure_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    store = JsonFileStore(blocker / "data")

    with pytest.raises(PersistenceError):
        store.set_item("k", "{}")
