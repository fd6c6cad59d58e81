"""Percentage change between a count and the count it is compared against."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from leadreport.core.models import DeltaKind, PercentageChange

NO_COMPARISON = PercentageChange(kind=DeltaKind.NONE)


def _round_one_decimal(value: float) -> float:
    rounded = float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
    # Collapse -0.0 so tiny negative changes read as neutral.
    return rounded if rounded != 0 else 0.0


def delta(current: int, previous: Optional[int]) -> PercentageChange:
    """Return the change from ``previous`` to ``current``.

    A missing previous period yields no comparison at all. A previous count of
    zero is its own case: ``+∞`` when leads appeared, ``0%`` when both are zero.
    Otherwise the percentage is rounded to one decimal and the sign is read
    from the rounded value.
    """

    if previous is None:
        return NO_COMPARISON

    if previous == 0:
        if current > 0:
            return PercentageChange(kind=DeltaKind.UNBOUNDED, sign="positive")
        return PercentageChange(kind=DeltaKind.ZERO_BASELINE, value=0.0, sign="neutral")

    change = _round_one_decimal((current - previous) / previous * 100)
    if change > 0:
        sign = "positive"
    elif change < 0:
        sign = "negative"
    else:
        sign = "neutral"
    return PercentageChange(kind=DeltaKind.PERCENT, value=change, sign=sign)
