from __future__ import annotations

import math


def round_half_up(value: float, digits: int = 2) -> float:
    """Round halves away from zero for non-negative values (2.5 -> 3, not 2)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_count(value: float) -> int:
    """Whole-class figure for display."""
    return int(round_half_up(value, 0))
