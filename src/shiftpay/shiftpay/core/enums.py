from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance record lifecycle state stored in the database."""

    CLOCKED_IN = "clocked_in"
    ON_BREAK = "on_break"
    CLOCKED_OUT = "clocked_out"


class QuickAction(str, Enum):
    """Actions a kiosk can offer for a staff member's current session."""

    CLOCK_IN = "clock_in"
    START_BREAK = "start_break"
    END_BREAK = "end_break"
    CLOCK_OUT = "clock_out"


class ContractType(str, Enum):
    SALARIED = "salaried"
    HOURLY_ACCRUAL = "zero_rate"


class ShiftType(str, Enum):
    MORNING = "morning"
    EVENING = "evening"


class WarningType(str, Enum):
    REST_PERIOD_VIOLATION = "rest_period_violation"
    OVERTIME_WARNING = "overtime_warning"


class TaxCodeKind(str, Enum):
    STANDARD = "standard"
    ZERO_ALLOWANCE = "zero_allowance"
    FLAT_RATE = "flat_rate"
    NO_TAX = "no_tax"
