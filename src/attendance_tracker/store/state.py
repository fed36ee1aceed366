from __future__ import annotations

from dataclasses import dataclass, field

from ..attendance.model import AttendanceRecord
from ..subjects.model import Subject
from ..timetable.model import Timetable, default_timetable


@dataclass
class AppState:
    """Everything the tracker knows. Owned by a single EntityStore."""

    subjects: list[Subject] = field(default_factory=list)
    timetable: Timetable = field(default_factory=default_timetable)
    attendance_records: list[AttendanceRecord] = field(default_factory=list)

    def copy(self) -> "AppState":
        # Entities are frozen, so copying the containers is enough.
        return AppState(
            subjects=list(self.subjects),
            timetable=self.timetable,
            attendance_records=list(self.attendance_records),
        )
