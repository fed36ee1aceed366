from __future__ import annotations

import math
from datetime import datetime
from typing import Iterable, Optional

from ..statistics.service import StatisticsService
from ..store.service import EntityStore
from ..timetable.model import Timetable
from .model import MonthlyProjection, ProjectionConfig, TargetProjection


def daily_class_load(timetable: Timetable, config: ProjectionConfig) -> float:
    """Average number of scheduled (non-free) periods per school day."""
    return timetable.scheduled_slot_count() / config.school_days_per_week


def remaining_school_days(monthly_total: int, daily_classes: float, config: ProjectionConfig) -> int:
    days_elapsed = math.floor(monthly_total / max(1, daily_classes))
    return max(0, config.month_school_days - days_elapsed)


def project_target(
    target: float,
    *,
    monthly_total: int,
    monthly_present: int,
    estimated_remaining: float,
) -> TargetProjection:
    total_projected = monthly_total + estimated_remaining
    # target * total / 100 keeps exact products exact (0.7 * 10 would not be).
    required_present = math.ceil(target * total_projected / 100)
    need_to_attend = max(0, required_present - monthly_present)
    can_miss = max(0, estimated_remaining - need_to_attend)
    return TargetProjection(
        target=target,
        total_projected=total_projected,
        required_present=required_present,
        need_to_attend=need_to_attend,
        can_miss=can_miss,
    )


def project(
    *,
    monthly_total: int,
    monthly_present: int,
    daily_classes: float,
    targets: Iterable[float],
    config: ProjectionConfig,
    current_percentage: float = 0.0,
) -> MonthlyProjection:
    remaining_days = remaining_school_days(monthly_total, daily_classes, config)
    estimated_remaining = remaining_days * daily_classes
    return MonthlyProjection(
        current_percentage=current_percentage,
        monthly_total=monthly_total,
        monthly_present=monthly_present,
        daily_classes=daily_classes,
        remaining_days=remaining_days,
        estimated_remaining_classes=estimated_remaining,
        targets=tuple(
            project_target(
                float(t),
                monthly_total=monthly_total,
                monthly_present=monthly_present,
                estimated_remaining=estimated_remaining,
            )
            for t in targets
        ),
    )


class ProjectionService:
    """Estimate how many classes are still needed (or can be missed) this month."""

    def __init__(
        self,
        store: EntityStore,
        statistics: StatisticsService,
        *,
        config: Optional[ProjectionConfig] = None,
    ):
        self._store = store
        self._statistics = statistics
        self._config = config or ProjectionConfig()

    @property
    def config(self) -> ProjectionConfig:
        return self._config

    def monthly_projection(
        self,
        targets: Optional[Iterable[float]] = None,
        *,
        now: Optional[datetime] = None,
    ) -> MonthlyProjection:
        monthly = self._statistics.monthly(now)
        return project(
            monthly_total=monthly.total_classes,
            monthly_present=monthly.present_classes,
            daily_classes=daily_class_load(self._store.state.timetable, self._config),
            targets=self._config.targets if targets is None else targets,
            config=self._config,
            current_percentage=monthly.percentage,
        )
