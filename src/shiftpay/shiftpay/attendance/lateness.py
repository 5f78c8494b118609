"""Lateness and no-show calculation.

Compares clock-in instants against scheduled shift starts. A missing or
unreadable schedule is a normal business state (unscheduled staff), so it
yields "not late" / "not a no-show" instead of an error.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import DateLike, TimeLike, ensure_utc, parse_shift_datetime
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LatenessResult:
    is_late: bool
    late_minutes: int
    grace_applied: bool


NOT_LATE = LatenessResult(is_late=False, late_minutes=0, grace_applied=False)


def _scheduled_instant(scheduled_start: Optional[TimeLike], shift_date: Optional[DateLike]) -> Optional[datetime]:
    if not scheduled_start or not shift_date:
        return None
    try:
        return parse_shift_datetime(shift_date, scheduled_start)
    except ValidationError as e:
        logger.warning("Ignoring unreadable schedule %r on %r: %s", scheduled_start, shift_date, e)
        return None


def _diff_minutes(instant: datetime, scheduled: datetime) -> int:
    return math.floor((ensure_utc(instant) - scheduled).total_seconds() / 60)


def evaluate_lateness(
    clock_in: datetime,
    scheduled_start: Optional[TimeLike],
    shift_date: Optional[DateLike],
    grace_minutes: int,
) -> LatenessResult:
    """Decide whether a clock-in is late.

    Within the grace period the clock-in counts as on time. Past it,
    late_minutes is the full deviation from the scheduled start, uncapped.
    """

    scheduled = _scheduled_instant(scheduled_start, shift_date)
    if scheduled is None:
        return NOT_LATE

    diff = _diff_minutes(clock_in, scheduled)
    if diff <= grace_minutes:
        return LatenessResult(is_late=False, late_minutes=0, grace_applied=diff > 0)
    return LatenessResult(is_late=True, late_minutes=diff, grace_applied=False)


def is_no_show(
    scheduled_start: Optional[TimeLike],
    shift_date: Optional[DateLike],
    now: datetime,
    threshold_minutes: int,
) -> bool:
    """True once `now` is at least threshold_minutes past the scheduled start."""

    scheduled = _scheduled_instant(scheduled_start, shift_date)
    if scheduled is None:
        return False
    return (ensure_utc(now) - scheduled).total_seconds() >= threshold_minutes * 60


def format_late_minutes(minutes: int) -> str:
    if minutes < 60:
        return f"{minutes}m"
    hours, mins = divmod(minutes, 60)
    return f"{hours}h {mins}m" if mins else f"{hours}h"
