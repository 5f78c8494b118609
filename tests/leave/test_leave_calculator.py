import pytest

from src.shiftpay.shiftpay.core.exceptions import ValidationError
from src.shiftpay.shiftpay.leave.calculator import (
    accrued_leave_hours,
    format_leave_hours,
    leave_request_hours,
    salaried_entitlement_hours,
)
from src.shiftpay.shiftpay.leave.model import LeaveBalance


def test_full_days_cost_eight_hours_each():
    assert leave_request_hours("2025-03-03", "2025-03-07") == 40.0
    assert leave_request_hours("2025-03-03", "2025-03-03") == 8.0


def test_partial_days_use_the_time_window():
    assert leave_request_hours("2025-03-03", "2025-03-04", "09:00", "13:30:00") == 9.0


def test_half_specified_window_counts_as_full_day():
    assert leave_request_hours("2025-03-03", "2025-03-03", "09:00", None) == 8.0


def test_bad_ranges_are_rejected():
    with pytest.raises(ValidationError):
        leave_request_hours("2025-03-07", "2025-03-03")
    with pytest.raises(ValidationError):
        leave_request_hours("2025-03-03", "2025-03-03", "13:00", "09:00")


def test_accrual_and_entitlement():
    assert accrued_leave_hours(100) == 12.07
    assert accrued_leave_hours(0) == 0.0
    assert salaried_entitlement_hours() == 224.0


def test_available_hours():
    balance = LeaveBalance(staff_id=1, year=2025, total_entitlement_hours=224, accrued_hours=4.5, used_hours=16)
    assert balance.available_hours == 212.5


def test_format_leave_hours():
    assert format_leave_hours(224) == "28.0 days (224.0h)"
    assert format_leave_hours(8) == "1 day (8.0h)"
    assert format_leave_hours(12.04) == "1.5 days (12.0h)"
