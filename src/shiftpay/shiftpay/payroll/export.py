from __future__ import annotations

from typing import Iterable

from ..common.money import fmt2, round2
from ..core.exceptions import ValidationError
from .model import PayrollSummary

HEADER = [
    "Staff Name",
    "Total Hours Worked",
    "Paid Break Hours",
    "Regular Hours",
    "Overtime Hours",
    "Hourly Rate (£)",
    "Overtime Pay (£)",
    "Gross Pay (£)",
    "Holiday Accrual (£)",
    "Tax Code",
    "Income Tax (£)",
    "Contribution Category",
    "Deduction (£)",
    "Net Pay (£)",
]

# label, summary field, column the total is written under
TOTALS = [
    ("Total Overtime Pay", "overtime_pay", 6),
    ("Total Gross Pay", "gross_pay", 7),
    ("Total Holiday Accrual", "holiday_accrual", 8),
    ("Total Income Tax", "income_tax", 10),
    ("Total Deduction", "deduction", 12),
    ("Total Net Pay", "net_pay", 13),
]


def _line(cells: list[str]) -> str:
    for cell in cells:
        if "," in cell or "\n" in cell:
            raise ValidationError(f"Cannot export {cell!r}: commas and line breaks are not allowed")
    return ",".join(cells)


def _row(s: PayrollSummary) -> list[str]:
    return [
        s.staff_name,
        fmt2(s.total_hours_worked),
        fmt2(s.paid_break_hours),
        fmt2(s.regular_hours),
        fmt2(s.overtime_hours),
        fmt2(s.hourly_rate),
        fmt2(s.overtime_pay),
        fmt2(s.gross_pay),
        fmt2(s.holiday_accrual),
        s.tax_code,
        fmt2(s.income_tax),
        s.contribution_category,
        fmt2(s.deduction),
        fmt2(s.net_pay),
    ]


def export_payroll_csv(summaries: Iterable[PayrollSummary]) -> str:
    """Payroll report as CSV text.

    Header, one row per staff member who worked, a blank line, then the
    totals, each under its own column. Cells are joined with bare commas,
    so a name holding a comma or line break is rejected. Output depends only
    on the input.
    """

    rows = [s for s in summaries if s.total_hours_worked > 0]

    lines = [_line(HEADER)]
    lines.extend(_line(_row(s)) for s in rows)

    lines.append("")
    for label, field_name, column in TOTALS:
        line = [""] * len(HEADER)
        line[0] = label
        line[column] = fmt2(round2(sum(round2(getattr(s, field_name)) for s in rows)))
        lines.append(_line(line))

    return "\n".join(lines) + "\n"
