from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from ..common.datetime_utils import parse_iso_date, parse_local_time, parse_shift_datetime
from ..core.enums import ShiftType


@dataclass(frozen=True)
class Shift:
    """Domain entity: one published shift for one staff member.

    Date and times may be given as strings; they are parsed once here.
    """

    shift_id: int
    staff_id: int
    shift_date: date
    start_time: time
    end_time: time
    shift_type: ShiftType = ShiftType.MORNING

    def __post_init__(self):
        object.__setattr__(self, "shift_date", parse_iso_date(self.shift_date))
        object.__setattr__(self, "start_time", parse_local_time(self.start_time))
        object.__setattr__(self, "end_time", parse_local_time(self.end_time))
        object.__setattr__(self, "shift_type", ShiftType(self.shift_type))

    @property
    def is_overnight(self) -> bool:
        return self.end_time < self.start_time

    @property
    def end_date(self) -> date:
        return self.shift_date + timedelta(days=1) if self.is_overnight else self.shift_date

    @property
    def local_start(self) -> datetime:
        return datetime.combine(self.shift_date, self.start_time)

    @property
    def local_end(self) -> datetime:
        return datetime.combine(self.end_date, self.end_time)

    def start_instant(self) -> datetime:
        return parse_shift_datetime(self.shift_date, self.start_time)

    def end_instant(self) -> datetime:
        return parse_shift_datetime(self.end_date, self.end_time)

    @property
    def scheduled_hours(self) -> float:
        return (self.end_instant() - self.start_instant()).total_seconds() / 3600
