from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from ..core.policy import EnginePolicy
from ..shifts.repository import ShiftRepository
from ..staff.repository import StaffRepository
from .checker import check_rest_period_violations, check_weekly_hours
from .model import ComplianceWarning


class ComplianceService:
    def __init__(self, shifts: ShiftRepository, staff: StaffRepository, *, policy: Optional[EnginePolicy] = None):
        self._shifts = shifts
        self._staff = staff
        self._policy = policy or EnginePolicy()

    def warnings_for_range(self, *, start: date, end: date) -> list[ComplianceWarning]:
        if end < start:
            raise ValidationError("Period end is before period start")

        shifts = list(self._shifts.list_range(start=start, end=end))
        staff = list(self._staff.list_all())

        return check_rest_period_violations(shifts, staff, self._policy) + check_weekly_hours(
            shifts, staff, self._policy
        )
