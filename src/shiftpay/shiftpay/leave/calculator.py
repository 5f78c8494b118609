"""Leave hours: request cost, accrual and display.

1 leave day = 8 hours. These functions only compute hours; crediting or
debiting the ledger is the store's job.
"""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..common.money import round2
from ..common.datetime_utils import DateLike, TimeLike, parse_iso_date, parse_local_time
from ..core.constants import DEFAULT_HOLIDAY_ACCRUAL_RATE, HOURS_PER_LEAVE_DAY, SALARIED_ANNUAL_LEAVE_DAYS
from ..core.exceptions import ValidationError


def _round1(value: float) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def leave_request_hours(
    start_date: DateLike,
    end_date: DateLike,
    start_time: Optional[TimeLike] = None,
    end_time: Optional[TimeLike] = None,
    hours_per_day: float = HOURS_PER_LEAVE_DAY,
) -> float:
    """Hours to deduct for a leave request.

    Without both times every day counts as a full day. With times, each day
    counts (end - start) hours. Result is rounded to 0.1h.
    """

    start = parse_iso_date(start_date)
    end = parse_iso_date(end_date)
    if end < start:
        raise ValidationError("Leave end date is before start date")

    days = (end - start).days + 1
    if not start_time or not end_time:
        return _round1(days * hours_per_day)

    t0 = parse_local_time(start_time)
    t1 = parse_local_time(end_time)
    per_day = (datetime.combine(start, t1) - datetime.combine(start, t0)).total_seconds() / 3600
    if per_day <= 0:
        raise ValidationError("Leave end time must be after start time")

    return _round1(days * per_day)


def accrued_leave_hours(total_hours_worked: float, rate: float = DEFAULT_HOLIDAY_ACCRUAL_RATE) -> float:
    """Holiday hours earned by an hourly-accrual contract."""
    if total_hours_worked <= 0:
        return 0.0
    return round2(total_hours_worked * rate)


def salaried_entitlement_hours(days: int = SALARIED_ANNUAL_LEAVE_DAYS) -> float:
    return float(days * HOURS_PER_LEAVE_DAY)


def format_leave_hours(hours: float) -> str:
    """e.g. 224 -> "28.0 days (224.0h)", 8 -> "1 day (8.0h)"."""
    h = _round1(hours)
    days = h / HOURS_PER_LEAVE_DAY
    label = "1 day" if days == 1 else f"{days:.1f} days"
    return f"{label} ({h:.1f}h)"
