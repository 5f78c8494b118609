"""UK (Europe/London) date/time helpers.

Use these for business "today", shift times and lateness so behaviour is
consistent regardless of the server or kiosk timezone. Instants are always
timezone-aware UTC datetimes; shift dates and times are civil UK values.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta, timezone
from typing import Optional, Union

from ..core.exceptions import ValidationError

DateLike = Union[date, str]
TimeLike = Union[time, str]

_BST_OFFSET = timedelta(hours=1)
_GMT_OFFSET = timedelta(0)


def parse_iso_date(value: DateLike) -> date:
    """Parse YYYY-MM-DD string into date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")


def parse_local_time(value: TimeLike) -> time:
    """Parse "HH:MM" or "HH:MM:SS" into a time of day."""
    if isinstance(value, time):
        return value
    try:
        parts = value.strip().split(":")
    except AttributeError:
        raise ValidationError(f"Invalid time: {value!r}")
    if len(parts) not in (2, 3):
        raise ValidationError(f"Invalid time: {value!r} (expected HH:MM)")
    try:
        hours, minutes = int(parts[0]), int(parts[1])
        seconds = int(parts[2]) if len(parts) == 3 else 0
        return time(hour=hours, minute=minutes, second=seconds)
    except ValueError:
        raise ValidationError(f"Invalid time: {value!r} (expected HH:MM)")


def _last_sunday(year: int, month: int) -> date:
    last = date(year, month, calendar.monthrange(year, month)[1])
    return last - timedelta(days=(last.weekday() + 1) % 7)


def uk_offset_for_date(day: date) -> timedelta:
    """UTC offset in force on a UK calendar date.

    BST (+1h) from the last Sunday of March up to (not including) the last
    Sunday of October, GMT (+0h) otherwise.
    """

    bst_start = _last_sunday(day.year, 3)
    bst_end = _last_sunday(day.year, 10)
    return _BST_OFFSET if bst_start <= day < bst_end else _GMT_OFFSET


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def business_now() -> datetime:
    """Current instant.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def to_local(instant: datetime) -> datetime:
    """Naive UK wall-clock datetime for an instant."""
    utc = ensure_utc(instant)
    return (utc + uk_offset_for_date(utc.date())).replace(tzinfo=None)


def business_today(now: Optional[datetime] = None) -> date:
    """Today's date in the UK."""
    return to_local(now or business_now()).date()


def parse_shift_datetime(shift_date: DateLike, local_time: TimeLike) -> datetime:
    """Instant (UTC) at which a UK shift date + clock time occurs."""
    day = parse_iso_date(shift_date)
    t = parse_local_time(local_time)
    naive = datetime.combine(day, t)
    return (naive - uk_offset_for_date(day)).replace(tzinfo=timezone.utc)


def business_day_bounds(day: DateLike) -> tuple[datetime, datetime]:
    """[start, end) UTC window covering a UK calendar date."""
    d = parse_iso_date(day)
    return parse_shift_datetime(d, time(0, 0)), parse_shift_datetime(d + timedelta(days=1), time(0, 0))


def format_day_time(local: datetime) -> str:
    """Short label such as "Mon 20:00"."""
    return local.strftime("%a %H:%M")


def to_utc_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Storage form for MySQL DATETIME columns."""
    if value is None:
        return None
    return ensure_utc(value).replace(tzinfo=None)


def from_utc_naive(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    return value.replace(tzinfo=timezone.utc)
