from __future__ import annotations

from dataclasses import dataclass, field

from ..common.number_utils import round_count, round_half_up
from ..core.constants import DEFAULT_MONTH_SCHOOL_DAYS, DEFAULT_SCHOOL_DAYS_PER_WEEK, DEFAULT_TARGETS


@dataclass(frozen=True)
class ProjectionConfig:
    """Calendar assumptions behind the month-end estimate.

    ``month_school_days`` caps how many school days a month is assumed to
    have; ``school_days_per_week`` divides the weekly class load into a daily
    average.
    """

    month_school_days: int = DEFAULT_MONTH_SCHOOL_DAYS
    school_days_per_week: int = DEFAULT_SCHOOL_DAYS_PER_WEEK
    targets: tuple[float, ...] = field(default=DEFAULT_TARGETS)


@dataclass(frozen=True)
class TargetProjection:
    target: float
    total_projected: float
    required_present: int
    need_to_attend: int
    can_miss: float

    def to_dict(self) -> dict:
        return {
            "target": self.target,
            "totalProjected": round_count(self.total_projected),
            "requiredPresent": self.required_present,
            "needToAttend": self.need_to_attend,
            "canMiss": round_count(self.can_miss),
        }


@dataclass(frozen=True)
class MonthlyProjection:
    """Month-end estimate. Assumes a fixed daily load; not a guarantee."""

    current_percentage: float
    monthly_total: int
    monthly_present: int
    daily_classes: float
    remaining_days: int
    estimated_remaining_classes: float
    targets: tuple[TargetProjection, ...]
    is_estimate: bool = True

    def for_target(self, target: float) -> TargetProjection | None:
        for t in self.targets:
            if t.target == target:
                return t
        return None

    def to_dict(self) -> dict:
        return {
            "currentPercentage": self.current_percentage,
            "monthlyTotal": self.monthly_total,
            "monthlyPresent": self.monthly_present,
            "dailyClasses": round_half_up(self.daily_classes, 2),
            "remainingDays": self.remaining_days,
            "estimatedRemainingClasses": round_count(self.estimated_remaining_classes),
            "targets": [t.to_dict() for t in self.targets],
            "isEstimate": self.is_estimate,
        }
