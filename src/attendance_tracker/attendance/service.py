from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Union

from ..common.datetime_utils import coerce_date, weekday_name
from ..core.enums import CLEAR, AttendanceStatus
from ..core.exceptions import ValidationError
from ..store.service import EntityStore
from ..timetable.model import TimeSlot
from .model import AttendanceRecord

logger = logging.getLogger(__name__)

DateLike = Union[date, str]


def coerce_status(value: Union[AttendanceStatus, str]) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Invalid attendance status: {value!r}")


class AttendanceService:
    """Ledger operations keyed by (date, time slot).

    At most one record exists per key: marking again replaces the record in
    place, clearing removes it.
    """

    def __init__(self, store: EntityStore):
        self._store = store

    @property
    def _records(self) -> list[AttendanceRecord]:
        return self._store.state.attendance_records

    def mark_attendance(
        self,
        record_date: DateLike,
        day: Optional[str],
        time_slot_id: str,
        subject_id: str,
        status: Union[AttendanceStatus, str],
    ) -> AttendanceRecord:
        record_date = coerce_date(record_date)
        record = AttendanceRecord(
            date=record_date,
            day=day or weekday_name(record_date),
            time_slot_id=str(time_slot_id),
            subject_id=str(subject_id),
            status=coerce_status(status),
        )

        records = list(self._records)
        for i, existing in enumerate(records):
            if existing.key == record.key:
                records[i] = record
                break
        else:
            records.append(record)

        self._store.state.attendance_records = records
        logger.debug("Marked %s slot %s as %s", record.date, record.time_slot_id, record.status.value)
        return record

    def clear_attendance(self, record_date: DateLike, time_slot_id: str) -> bool:
        key = (coerce_date(record_date), str(time_slot_id))
        records = [r for r in self._records if r.key != key]
        if len(records) == len(self._records):
            return False
        self._store.state.attendance_records = records
        logger.debug("Cleared %s slot %s", key[0], key[1])
        return True

    def mark_all_day_attendance(
        self,
        record_date: DateLike,
        day: Optional[str],
        status: Union[AttendanceStatus, str],
    ) -> int:
        """Mark (or clear) every slot with a subject on that weekday.

        Returns how many slots were touched; free periods are skipped.
        """
        record_date = coerce_date(record_date)
        day = day or weekday_name(record_date)
        clear = isinstance(status, str) and status.strip().lower() == CLEAR
        if not clear:
            status = coerce_status(status)

        slots = self.scheduled_slots(day)
        for slot in slots:
            if clear:
                self.clear_attendance(record_date, slot.id)
            else:
                self.mark_attendance(record_date, day, slot.id, slot.subject_id, status)

        if slots:
            logger.info("%s: %s applied to %d classes", record_date, CLEAR if clear else status.value, len(slots))
        return len(slots)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def scheduled_slots(self, day: str) -> tuple[TimeSlot, ...]:
        day_schedule = self._store.state.timetable.day(day)
        if day_schedule is None:
            return ()
        return day_schedule.scheduled_slots()

    def get_record(self, record_date: DateLike, time_slot_id: str) -> Optional[AttendanceRecord]:
        key = (coerce_date(record_date), str(time_slot_id))
        for r in self._records:
            if r.key == key:
                return r
        return None

    def records_for_date(self, record_date: DateLike) -> list[AttendanceRecord]:
        record_date = coerce_date(record_date)
        return [r for r in self._records if r.date == record_date]

    def records_by_date(self) -> list[tuple[date, list[AttendanceRecord]]]:
        """History grouped by date, newest first."""
        grouped: dict[date, list[AttendanceRecord]] = {}
        for r in self._records:
            grouped.setdefault(r.date, []).append(r)
        return sorted(grouped.items(), key=lambda item: item[0], reverse=True)
