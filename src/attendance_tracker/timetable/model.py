from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import time
from typing import Iterator, Optional

from ..common.datetime_utils import parse_clock
from ..core.constants import DEFAULT_SLOT_TIMES, SCHOOL_DAYS


@dataclass(frozen=True)
class TimeSlot:
    """One period of a weekday. No subject means a free period."""

    id: str
    start_time: time
    end_time: time
    subject_id: Optional[str] = None

    @property
    def is_free(self) -> bool:
        return not self.subject_id


@dataclass(frozen=True)
class DaySchedule:
    day: str
    time_slots: tuple[TimeSlot, ...] = ()

    def slot(self, time_slot_id: str) -> Optional[TimeSlot]:
        for slot in self.time_slots:
            if slot.id == time_slot_id:
                return slot
        return None

    def scheduled_slots(self) -> tuple[TimeSlot, ...]:
        return tuple(s for s in self.time_slots if not s.is_free)


@dataclass(frozen=True)
class Timetable:
    """Weekly timetable: at most one DaySchedule per weekday."""

    schedule: tuple[DaySchedule, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[DaySchedule]:
        return iter(self.schedule)

    def day(self, name: str) -> Optional[DaySchedule]:
        for ds in self.schedule:
            if ds.day == name:
                return ds
        return None

    def scheduled_slot_count(self) -> int:
        return sum(len(ds.scheduled_slots()) for ds in self.schedule)

    def replace_day(self, day_schedule: DaySchedule) -> "Timetable":
        return replace(
            self,
            schedule=tuple(day_schedule if ds.day == day_schedule.day else ds for ds in self.schedule),
        )


def default_timetable() -> Timetable:
    """Monday to Saturday, seven free periods each."""
    slots = tuple(
        TimeSlot(id=str(i), start_time=parse_clock(start), end_time=parse_clock(end))
        for i, (start, end) in enumerate(DEFAULT_SLOT_TIMES, start=1)
    )
    return Timetable(schedule=tuple(DaySchedule(day=day, time_slots=slots) for day in SCHOOL_DAYS))
