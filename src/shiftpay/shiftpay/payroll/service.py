from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta
from typing import Iterable, Iterator, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import business_day_bounds
from ..common.money import round2
from ..core.exceptions import ValidationError
from ..core.policy import EnginePolicy
from ..staff.model import StaffProfile
from ..staff.repository import StaffRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .deductions import calculate_deduction, calculate_net_pay
from .export import export_payroll_csv
from .model import PayrollSummary
from .tax import calculate_income_tax


def generate_payroll_summary(
    staff: StaffProfile,
    records: Iterable[AttendanceRecord],
    policy: Optional[EnginePolicy] = None,
    calculator: Optional[PayrollCalculator] = None,
) -> PayrollSummary:
    """Hours, overtime, gross/net pay and holiday accrual for one pay week.

    Only this staff member's clocked-out records count. A record without a
    logged break is assumed to include the default paid break.
    """

    policy = policy or EnginePolicy()
    calculator = calculator or StandardPayrollCalculator()

    completed = [r for r in records if r.staff_id == staff.staff_id and r.clock_out_time is not None]

    total_hours = 0.0
    paid_break_hours = 0.0
    for r in completed:
        total_hours += calculator.hours_worked(r)
        taken = r.break_minutes
        paid_break_hours += taken / 60 if taken is not None else policy.paid_break_hours

    threshold = policy.weekly_overtime_threshold
    regular_hours = min(total_hours, threshold)
    overtime_hours = max(0.0, total_hours - threshold)

    rate = float(staff.hourly_rate)
    regular_pay = regular_hours * rate
    overtime_pay = overtime_hours * rate * policy.overtime_multiplier
    gross_pay = round2(regular_pay + overtime_pay)

    holiday_accrual = round2(gross_pay * policy.holiday_accrual_rate) if staff.accrues_holiday_from_pay else 0.0

    income_tax = calculate_income_tax(gross_pay, staff.tax_code, policy.tax)
    deduction = calculate_deduction(gross_pay, staff.contribution_category, policy.tax)

    return PayrollSummary(
        staff_id=staff.staff_id,
        staff_name=staff.name,
        total_hours_worked=round2(total_hours),
        paid_break_hours=round2(paid_break_hours),
        regular_hours=round2(regular_hours),
        overtime_hours=round2(overtime_hours),
        hourly_rate=round2(rate),
        overtime_pay=round2(overtime_pay),
        gross_pay=gross_pay,
        holiday_accrual=holiday_accrual,
        tax_code=staff.tax_code.code or policy.tax.default_tax_code,
        contribution_category=staff.contribution_category or policy.tax.nic_standard_category,
        income_tax=income_tax,
        deduction=deduction,
        net_pay=calculate_net_pay(gross_pay, income_tax, deduction),
        late_count=sum(1 for r in completed if r.is_late),
        total_late_minutes=sum(r.late_minutes for r in completed),
    )


# summed when one staff member's weekly summaries are combined
_SUMMED_FIELDS = (
    "total_hours_worked",
    "paid_break_hours",
    "regular_hours",
    "overtime_hours",
    "overtime_pay",
    "gross_pay",
    "holiday_accrual",
    "income_tax",
    "deduction",
    "net_pay",
)


def iter_pay_weeks(start: date, end: date) -> Iterator[tuple[date, date]]:
    """Monday to Sunday weeks covering [start, end], clipped at both ends."""

    week_start = start
    while week_start <= end:
        week_end = min(end, week_start + timedelta(days=6 - week_start.weekday()))
        yield week_start, week_end
        week_start = week_end + timedelta(days=1)


def combine_weekly_summaries(weekly: list[PayrollSummary]) -> PayrollSummary:
    first = weekly[0]
    totals = {name: round2(sum(getattr(s, name) for s in weekly)) for name in _SUMMED_FIELDS}
    return replace(
        first,
        **totals,
        late_count=sum(s.late_count for s in weekly),
        total_late_minutes=sum(s.total_late_minutes for s in weekly),
    )


class PayrollService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        staff: StaffRepository,
        *,
        policy: Optional[EnginePolicy] = None,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._attendance = attendance
        self._staff = staff
        self._policy = policy or EnginePolicy()
        self._calculator = calculator or StandardPayrollCalculator()

    def build_summaries(self, *, start: date, end: date) -> list[PayrollSummary]:
        if end < start:
            raise ValidationError("Period end is before period start")

        staff = list(self._staff.list_all())
        weekly: dict[int, list[PayrollSummary]] = {s.staff_id: [] for s in staff}

        # overtime threshold and tax and NI bands are per week
        for week_start, week_end in iter_pay_weeks(start, end):
            window_start, _ = business_day_bounds(week_start)
            _, window_end = business_day_bounds(week_end)
            records = list(self._attendance.list_completed_between(window_start, window_end))
            for s in staff:
                weekly[s.staff_id].append(generate_payroll_summary(s, records, self._policy, self._calculator))

        return [combine_weekly_summaries(weekly[s.staff_id]) for s in staff]

    def export_csv(self, *, start: date, end: date) -> str:
        return export_payroll_csv(self.build_summaries(start=start, end=end))
