from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import coerce_date, now_local, weekday_name
from ..common.number_utils import round_half_up
from ..core.constants import GOOD_THRESHOLD, WARNING_THRESHOLD
from ..core.enums import AttendanceStatus, StatusLevel
from ..store.service import EntityStore
from .model import AttendanceStats, DayStats, SubjectStatsRow


def compute_stats(records: Iterable[AttendanceRecord]) -> AttendanceStats:
    """Counts and percentage over a ledger slice.

    Cancelled classes are counted on their own and never enter the
    denominator.
    """
    present = absent = cancelled = 0
    for r in records:
        if r.status == AttendanceStatus.PRESENT:
            present += 1
        elif r.status == AttendanceStatus.ABSENT:
            absent += 1
        elif r.status == AttendanceStatus.CANCELLED:
            cancelled += 1

    total = present + absent
    percentage = round_half_up(present / total * 100) if total > 0 else 0.0
    return AttendanceStats(
        total_classes=total,
        present_classes=present,
        absent_classes=absent,
        cancelled_classes=cancelled,
        percentage=percentage,
    )


def filter_records(
    records: Iterable[AttendanceRecord],
    *,
    year: Optional[int] = None,
    month: Optional[int] = None,
    subject_id: Optional[str] = None,
    on_date: Optional[date] = None,
) -> list[AttendanceRecord]:
    out = []
    for r in records:
        if year is not None and r.date.year != year:
            continue
        if month is not None and r.date.month != month:
            continue
        if subject_id is not None and r.subject_id != subject_id:
            continue
        if on_date is not None and r.date != on_date:
            continue
        out.append(r)
    return out


def status_level(percentage: float) -> StatusLevel:
    if percentage >= GOOD_THRESHOLD:
        return StatusLevel.GOOD
    if percentage >= WARNING_THRESHOLD:
        return StatusLevel.WARNING
    return StatusLevel.CRITICAL


class StatisticsService:
    """Read-only queries over the current ledger, recomputed on every call."""

    def __init__(self, store: EntityStore, *, clock: Callable[[], datetime] = now_local):
        self._store = store
        self._clock = clock

    def _records(self) -> Sequence[AttendanceRecord]:
        return self._store.state.attendance_records

    def _month_filter(self, now: Optional[datetime]) -> dict:
        now = now or self._clock()
        return {"year": now.year, "month": now.month}

    def overall(self) -> AttendanceStats:
        return compute_stats(self._records())

    def monthly(self, now: Optional[datetime] = None) -> AttendanceStats:
        return compute_stats(filter_records(self._records(), **self._month_filter(now)))

    def for_subject(self, subject_id: str, *, monthly: bool = False, now: Optional[datetime] = None) -> AttendanceStats:
        scope = self._month_filter(now) if monthly else {}
        return compute_stats(filter_records(self._records(), subject_id=subject_id, **scope))

    def for_date(self, on_date: date | str) -> DayStats:
        on_date = coerce_date(on_date)
        stats = compute_stats(filter_records(self._records(), on_date=on_date))
        level = status_level(stats.percentage) if stats.total_classes else None
        return DayStats(date=on_date.isoformat(), day=weekday_name(on_date), stats=stats, level=level)

    def subject_breakdown(self, *, monthly: bool = False, now: Optional[datetime] = None) -> list[SubjectStatsRow]:
        """One row per subject, followed by ids only found on orphaned records."""
        scope = self._month_filter(now) if monthly else {}
        records = filter_records(self._records(), **scope)

        rows: list[SubjectStatsRow] = []
        known = set()
        for subject in self._store.state.subjects:
            known.add(subject.id)
            stats = compute_stats(r for r in records if r.subject_id == subject.id)
            rows.append(
                SubjectStatsRow(
                    subject_id=subject.id,
                    name=subject.name,
                    color=subject.color,
                    stats=stats,
                    level=status_level(stats.percentage),
                )
            )

        orphan_ids = sorted({r.subject_id for r in records if r.subject_id not in known})
        for subject_id in orphan_ids:
            stats = compute_stats(r for r in records if r.subject_id == subject_id)
            rows.append(
                SubjectStatsRow(
                    subject_id=subject_id,
                    name=self._store.subject_name(subject_id),
                    color=self._store.subject_color(subject_id),
                    stats=stats,
                    level=status_level(stats.percentage),
                    orphaned=True,
                )
            )
        return rows
