from __future__ import annotations

from datetime import datetime

import pytest

from attendance_tracker.store.service import EntityStore


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 9, 30, 0)


@pytest.fixture
def store(fixed_now) -> EntityStore:
    counter = iter(range(1, 10_000))
    return EntityStore(clock=lambda: fixed_now, id_factory=lambda: f"s{next(counter)}")
