from __future__ import annotations

from .base import PayrollCalculator
from ...attendance.model import AttendanceRecord
from ...common.money import round2


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: out - in, in whole minutes, as hours (2dp).

    Breaks are paid, so break time is not subtracted.
    """

    def hours_worked(self, record: AttendanceRecord) -> float:
        if not record.clock_out_time:
            return 0.0
        minutes = int((record.clock_out_time - record.clock_in_time).total_seconds() // 60)
        return round2(max(minutes, 0) / 60)
