from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import StatusLevel


@dataclass(frozen=True)
class AttendanceStats:
    total_classes: int
    present_classes: int
    absent_classes: int
    cancelled_classes: int
    percentage: float

    def to_dict(self) -> dict:
        return {
            "totalClasses": self.total_classes,
            "presentClasses": self.present_classes,
            "absentClasses": self.absent_classes,
            "cancelledClasses": self.cancelled_classes,
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class SubjectStatsRow:
    """Read-model for the per-subject table."""

    subject_id: str
    name: str
    color: str
    stats: AttendanceStats
    level: StatusLevel
    orphaned: bool = False

    def to_dict(self) -> dict:
        return {
            "subjectId": self.subject_id,
            "name": self.name,
            "color": self.color,
            "level": self.level.value,
            "orphaned": self.orphaned,
            **self.stats.to_dict(),
        }


@dataclass(frozen=True)
class DayStats:
    """Read-model for a single calendar date."""

    date: str
    day: str
    stats: AttendanceStats
    level: Optional[StatusLevel] = None

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "day": self.day,
            "level": self.level.value if self.level else None,
            **self.stats.to_dict(),
        }
