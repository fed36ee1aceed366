from __future__ import annotations

from datetime import date

import pytest

from attendance_tracker.attendance.service import AttendanceService
from attendance_tracker.core.enums import CLEAR, AttendanceStatus
from attendance_tracker.core.exceptions import ValidationError


@pytest.fixture
def ledger(store) -> AttendanceService:
    return AttendanceService(store)


def _schedule_friday(store):
    math = store.add_subject("Math", "#000")
    physics = store.add_subject("Physics", "#111")
    store.assign_subject_to_slot("Friday", "1", math.id)
    store.assign_subject_to_slot("Friday", "3", physics.id)
    return math, physics


def test_mark_same_key_keeps_one_record_equal_to_last_call(store, ledger):
    ledger.mark_attendance("2024-03-01", "Friday", "1", "s1", "present")
    ledger.mark_attendance("2024-03-01", "Friday", "2", "s2", "present")
    ledger.mark_attendance(date(2024, 3, 1), "Friday", "1", "s9", AttendanceStatus.CANCELLED)
    ledger.mark_attendance("2024-03-01", "Friday", "1", "s1", "absent")

    records = [r for r in store.state.attendance_records if r.key == (date(2024, 3, 1), "1")]
    assert len(records) == 1
    assert records[0].subject_id == "s1"
    assert records[0].status == AttendanceStatus.ABSENT
    # Replaced in place, not appended
    assert store.state.attendance_records[0].time_slot_id == "1"
    assert len(store.state.attendance_records) == 2


def test_mark_derives_day_when_missing(ledger):
    record = ledger.mark_attendance("2024-03-01", None, "1", "s1", "present")
    assert record.day == "Friday"


def test_mark_rejects_unknown_status(store, ledger):
    with pytest.raises(ValidationError):
        ledger.mark_attendance("2024-03-01", "Friday", "1", "s1", "late")
    assert store.state.attendance_records == []


def test_mark_rejects_bad_date(ledger):
    with pytest.raises(ValidationError):
        ledger.mark_attendance("01/03/2024", "Friday", "1", "s1", "present")


def test_clear_removes_only_exact_key(store, ledger):
    ledger.mark_attendance("2024-03-01", "Friday", "1", "s1", "present")
    ledger.mark_attendance("2024-03-02", "Saturday", "1", "s1", "present")

    assert ledger.clear_attendance("2024-03-01", "1") is True
    assert ledger.clear_attendance("2024-03-01", "1") is False

    assert [r.date for r in store.state.attendance_records] == [date(2024, 3, 2)]


def test_mark_all_day_marks_only_assigned_slots(store, ledger):
    math, physics = _schedule_friday(store)

    count = ledger.mark_all_day_attendance("2024-03-01", "Friday", "present")

    assert count == 2
    by_slot = {r.time_slot_id: r for r in store.state.attendance_records}
    assert set(by_slot) == {"1", "3"}
    assert by_slot["1"].subject_id == math.id
    assert by_slot["3"].subject_id == physics.id
    assert all(r.status == AttendanceStatus.PRESENT for r in by_slot.values())


def test_mark_all_day_clear_sentinel_removes_records(store, ledger):
    _schedule_friday(store)
    ledger.mark_all_day_attendance("2024-03-01", "Friday", "absent")
    ledger.mark_attendance("2024-03-02", "Saturday", "1", "s1", "present")

    ledger.mark_all_day_attendance("2024-03-01", "Friday", CLEAR)

    assert [r.date for r in store.state.attendance_records] == [date(2024, 3, 2)]


def test_mark_all_day_on_day_without_classes_does_nothing(store, ledger):
    assert ledger.mark_all_day_attendance("2024-03-03", "Sunday", "present") == 0
    assert ledger.mark_all_day_attendance("2024-03-04", "Monday", "present") == 0
    assert store.state.attendance_records == []


def test_records_by_date_newest_first(ledger):
    ledger.mark_attendance("2024-03-01", "Friday", "1", "s1", "present")
    ledger.mark_attendance("2024-03-05", "Tuesday", "1", "s1", "absent")
    ledger.mark_attendance("2024-03-01", "Friday", "2", "s1", "absent")

    grouped = ledger.records_by_date()

    assert [d for d, _ in grouped] == [date(2024, 3, 5), date(2024, 3, 1)]
    assert len(grouped[1][1]) == 2
