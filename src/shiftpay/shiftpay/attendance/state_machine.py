"""Attendance session transitions.

    NONE -> clocked_in <-> on_break
            clocked_in / on_break -> clocked_out (terminal)

A new clock-in after clocked_out starts a new record; it is never a
transition of the old one. Every function here is pure: it returns the
next record and leaves persistence to the caller.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import ensure_utc
from ..core.enums import AttendanceStatus, QuickAction
from ..core.exceptions import InvalidTransitionError
from .model import AttendanceRecord


def start_break(record: AttendanceRecord, at: datetime) -> AttendanceRecord:
    if record.status != AttendanceStatus.CLOCKED_IN:
        raise InvalidTransitionError(f"Cannot start a break while {record.status.value}")
    if record.break_start_time is not None:
        raise InvalidTransitionError("Break already taken for this session")
    return replace(record, break_start_time=ensure_utc(at), status=AttendanceStatus.ON_BREAK)


def end_break(record: AttendanceRecord, at: datetime) -> AttendanceRecord:
    if record.status != AttendanceStatus.ON_BREAK:
        raise InvalidTransitionError("No break in progress")
    return replace(record, break_end_time=ensure_utc(at), status=AttendanceStatus.CLOCKED_IN)


def clock_out(record: AttendanceRecord, at: datetime) -> AttendanceRecord:
    if record.status == AttendanceStatus.CLOCKED_OUT:
        raise InvalidTransitionError("Already clocked out")

    at = ensure_utc(at)
    if record.status == AttendanceStatus.ON_BREAK:
        # Clocking out mid-break closes the break at the same instant.
        record = replace(record, break_end_time=at, status=AttendanceStatus.CLOCKED_IN)
    return replace(record, clock_out_time=at, status=AttendanceStatus.CLOCKED_OUT)


def allowed_actions(active: Optional[AttendanceRecord]) -> frozenset[QuickAction]:
    """Actions a front-end may offer given the staff member's latest record."""

    if active is None or active.status == AttendanceStatus.CLOCKED_OUT:
        return frozenset({QuickAction.CLOCK_IN})

    actions = {QuickAction.CLOCK_OUT}
    if active.status == AttendanceStatus.CLOCKED_IN and active.break_start_time is None:
        actions.add(QuickAction.START_BREAK)
    if active.status == AttendanceStatus.ON_BREAK:
        actions.add(QuickAction.END_BREAK)
    return frozenset(actions)
