from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: outcome of one class on one date.

    ``day`` is kept alongside ``date`` so the record still displays correctly
    after the timetable changes. Keyed by ``(date, time_slot_id)``.
    """

    date: date
    day: str
    time_slot_id: str
    subject_id: str
    status: AttendanceStatus

    @property
    def key(self) -> tuple[date, str]:
        return self.date, self.time_slot_id
