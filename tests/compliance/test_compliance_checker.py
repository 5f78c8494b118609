from datetime import date

from src.shiftpay.shiftpay.compliance.checker import check_rest_period_violations, check_weekly_hours
from src.shiftpay.shiftpay.compliance.service import ComplianceService
from src.shiftpay.shiftpay.core.enums import WarningType
from src.shiftpay.shiftpay.core.policy import EnginePolicy
from src.shiftpay.shiftpay.shifts.model import Shift


def _shift(shift_id, staff_id, day, start, end):
    return Shift(shift_id=shift_id, staff_id=staff_id, shift_date=day, start_time=start, end_time=end)


def test_exactly_eleven_hours_is_fine(staff_repo):
    shifts = [
        _shift(1, 1, "2025-01-06", "14:00", "22:00"),
        _shift(2, 1, "2025-01-07", "09:00", "17:00"),
    ]
    assert check_rest_period_violations(shifts, staff_repo.list_all()) == []


def test_short_rest_is_reported_in_whole_hours(staff_repo):
    shifts = [
        _shift(2, 1, "2025-01-07", "09:00", "17:00"),
        _shift(1, 1, "2025-01-06", "12:00", "22:15"),
    ]

    [warning] = check_rest_period_violations(shifts, staff_repo.list_all())

    assert warning.kind == WarningType.REST_PERIOD_VIOLATION
    assert warning.staff_name == "Alice Smith"
    assert warning.rest_hours == 10
    assert warning.shift_date == date(2025, 1, 7)
    assert warning.previous_shift_end == "Mon 22:15"
    assert warning.next_shift_start == "Tue 09:00"
    assert warning.message == "Only 10h rest between shifts (minimum 11h required)"


def test_overnight_shift_ends_next_day(staff_repo):
    shifts = [
        _shift(1, 2, "2025-01-06", "22:00", "06:00"),
        _shift(2, 2, "2025-01-07", "14:00", "22:00"),
    ]

    [warning] = check_rest_period_violations(shifts, staff_repo.list_all())

    assert warning.rest_hours == 8
    assert warning.previous_shift_end == "Tue 06:00"


def test_clocks_going_forward_shorten_the_rest(staff_repo):
    # 20:00 GMT Saturday to 07:00 BST Sunday is 10 real hours
    shifts = [
        _shift(1, 1, "2025-03-29", "12:00", "20:00"),
        _shift(2, 1, "2025-03-30", "07:00", "15:00"),
    ]

    [warning] = check_rest_period_violations(shifts, staff_repo.list_all())

    assert warning.rest_hours == 10
    assert warning.previous_shift_end == "Sat 20:00"
    assert warning.next_shift_start == "Sun 07:00"


def test_clocks_going_back_lengthen_the_rest(staff_repo):
    # 20:00 BST Saturday to 06:00 GMT Sunday is 11 real hours
    shifts = [
        _shift(1, 1, "2025-10-25", "12:00", "20:00"),
        _shift(2, 1, "2025-10-26", "06:00", "14:00"),
    ]
    assert check_rest_period_violations(shifts, staff_repo.list_all()) == []


def test_staff_are_checked_independently(staff_repo):
    shifts = [
        _shift(1, 1, "2025-01-06", "09:00", "17:00"),
        _shift(2, 2, "2025-01-06", "20:00", "23:00"),
        _shift(3, 1, "2025-01-07", "09:00", "17:00"),
    ]
    assert check_rest_period_violations(shifts, staff_repo.list_all()) == []


def test_unknown_staff_are_ignored(staff_repo):
    shifts = [
        _shift(1, 77, "2025-01-06", "12:00", "23:00"),
        _shift(2, 77, "2025-01-07", "06:00", "14:00"),
    ]
    assert check_rest_period_violations(shifts, staff_repo.list_all()) == []


def test_minimum_rest_comes_from_policy(staff_repo):
    shifts = [
        _shift(1, 1, "2025-01-06", "12:00", "22:15"),
        _shift(2, 1, "2025-01-07", "09:00", "17:00"),
    ]
    assert check_rest_period_violations(shifts, staff_repo.list_all(), EnginePolicy(min_rest_hours=10)) == []


def test_weekly_hours_over_the_limit(staff_repo):
    shifts = [_shift(i, 2, date(2025, 1, 5 + i), "08:00", "17:00") for i in range(1, 7)]

    [warning] = check_weekly_hours(shifts, staff_repo.list_all())

    assert warning.kind == WarningType.OVERTIME_WARNING
    assert warning.weekly_hours == 54.0
    assert warning.shift_date == date(2025, 1, 6)
    assert warning.message == "Scheduled for 54h in week 2 (maximum 48h)"


def test_weekly_hours_are_split_by_iso_week(staff_repo):
    # Sun 12th and Mon 13th fall in different weeks
    shifts = [_shift(i, 2, date(2025, 1, 7 + i), "06:00", "18:00") for i in range(0, 8)]
    warnings = check_weekly_hours(shifts, staff_repo.list_all())
    assert [w.weekly_hours for w in warnings] == [72.0]


def test_service_combines_both_checks(shifts_repo, staff_repo):
    shifts_repo.add(_shift(1, 1, "2025-01-06", "12:00", "22:15"))
    shifts_repo.add(_shift(2, 1, "2025-01-07", "09:00", "17:00"))
    for i in range(1, 7):
        shifts_repo.add(_shift(10 + i, 2, date(2025, 1, 5 + i), "08:00", "17:00"))

    warnings = ComplianceService(shifts_repo, staff_repo).warnings_for_range(
        start=date(2025, 1, 6), end=date(2025, 1, 12)
    )

    assert sorted(w.kind.value for w in warnings) == ["overtime_warning", "rest_period_violation"]
    assert warnings[0].to_dict()["shift_date"] == "2025-01-07"
