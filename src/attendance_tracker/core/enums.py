from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Outcome recorded for one scheduled class."""

    PRESENT = "present"
    ABSENT = "absent"
    CANCELLED = "cancelled"


class StatusLevel(str, Enum):
    """Colour band for an attendance percentage."""

    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


# Bulk per-day action that removes records instead of marking them.
CLEAR = "clear"
