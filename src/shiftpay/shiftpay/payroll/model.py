from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PayrollSummary:
    """Read-model for one staff member over one pay period (not persisted).

    Every money and hours figure is already rounded to 2dp.
    """

    staff_id: int
    staff_name: str
    total_hours_worked: float
    paid_break_hours: float
    regular_hours: float
    overtime_hours: float
    hourly_rate: float
    overtime_pay: float
    gross_pay: float
    holiday_accrual: float
    tax_code: str
    contribution_category: str
    income_tax: float
    deduction: float
    net_pay: float
    late_count: int = 0
    total_late_minutes: int = 0
