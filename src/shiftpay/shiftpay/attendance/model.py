from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Optional

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one clock-in session.

    The status decides which timestamps may be present, and construction
    rejects combinations no transition can produce:

    - clocked_in:  no clock-out; a break, if any, is finished
    - on_break:    break started, not ended; no clock-out
    - clocked_out: clock-out set; a break, if any, is finished
    """

    attendance_id: int
    staff_id: int
    clock_in_time: datetime
    status: AttendanceStatus = AttendanceStatus.CLOCKED_IN
    break_start_time: Optional[datetime] = None
    break_end_time: Optional[datetime] = None
    clock_out_time: Optional[datetime] = None
    scheduled_start_time: Optional[time] = None
    is_late: bool = False
    late_minutes: int = 0
    override_by: Optional[int] = None
    override_pin_used: bool = False
    face_match_confidence: Optional[float] = None
    notes: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "status", AttendanceStatus(self.status))

        if self.late_minutes < 0:
            raise ValidationError("late_minutes cannot be negative")
        if self.break_end_time is not None and self.break_start_time is None:
            raise ValidationError("Break end recorded without a break start")

        if self.status == AttendanceStatus.ON_BREAK:
            if self.break_start_time is None or self.break_end_time is not None:
                raise ValidationError("on_break requires an open break")
            if self.clock_out_time is not None:
                raise ValidationError("on_break record cannot have a clock-out")
        elif self.status == AttendanceStatus.CLOCKED_IN:
            if self.clock_out_time is not None:
                raise ValidationError("clocked_in record cannot have a clock-out")
            if self.break_start_time is not None and self.break_end_time is None:
                raise ValidationError("clocked_in record has an unfinished break")
        else:
            if self.clock_out_time is None:
                raise ValidationError("clocked_out record requires a clock-out time")
            if self.break_start_time is not None and self.break_end_time is None:
                raise ValidationError("clocked_out record has an unfinished break")

    @property
    def is_active(self) -> bool:
        return self.status != AttendanceStatus.CLOCKED_OUT

    @property
    def break_minutes(self) -> Optional[int]:
        """Whole minutes of a finished break, None when no break was logged."""
        if self.break_start_time is None or self.break_end_time is None:
            return None
        return int((self.break_end_time - self.break_start_time).total_seconds() // 60)


@dataclass(frozen=True)
class NewAttendanceRecord:
    """Values for a fresh clock-in, before the store assigns an id."""

    staff_id: int
    clock_in_time: datetime
    scheduled_start_time: Optional[time] = None
    is_late: bool = False
    late_minutes: int = 0
    override_by: Optional[int] = None
    override_pin_used: bool = False
    face_match_confidence: Optional[float] = None
    notes: Optional[str] = None
