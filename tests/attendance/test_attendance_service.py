from datetime import date, time

import pytest

from src.shiftpay.shiftpay.attendance.service import AttendanceService
from src.shiftpay.shiftpay.core.enums import AttendanceStatus, QuickAction
from src.shiftpay.shiftpay.core.exceptions import ConflictError, InvalidTransitionError, NotFoundError
from src.shiftpay.shiftpay.shifts.model import Shift
from tests.fakes import FixedClock, utc


@pytest.fixture
def clock():
    return FixedClock(utc(2025, 1, 6, 9, 0))


@pytest.fixture
def service(attendance_repo, staff_repo, shifts_repo, policy, clock):
    return AttendanceService(attendance_repo, staff_repo, shifts_repo, policy=policy, clock=clock)


def test_scheduled_shift_makes_clock_in_late(service, shifts_repo, clock):
    shifts_repo.add(Shift(shift_id=10, staff_id=1, shift_date=date(2025, 1, 6), start_time="08:00", end_time="16:00"))
    clock.now = utc(2025, 1, 6, 8, 6)

    record = service.clock_in(1)

    assert record.is_late
    assert record.late_minutes == 6
    assert record.scheduled_start_time == time(8, 0)
    assert record.notes == "Late by 6m"
    assert record.status == AttendanceStatus.CLOCKED_IN


def test_unscheduled_clock_in_is_never_late(service, clock):
    clock.now = utc(2025, 1, 6, 15, 0)
    record = service.clock_in(2)
    assert not record.is_late
    assert record.scheduled_start_time is None


def test_explicit_schedule_defaults_to_todays_date(service, clock):
    clock.now = utc(2025, 1, 6, 9, 20)
    record = service.clock_in(2, scheduled_start="09:00")
    assert record.is_late
    assert record.late_minutes == 20


def test_clock_in_keeps_override_details(service):
    record = service.clock_in(1, face_confidence="0.91", override_by=9, override_pin_used=True)
    assert record.face_match_confidence == pytest.approx(0.91)
    assert record.override_by == 9
    assert record.override_pin_used


def test_unknown_staff_is_rejected(service):
    with pytest.raises(NotFoundError):
        service.clock_in(404)


def test_second_clock_in_while_active_is_rejected(service):
    service.clock_in(1)
    with pytest.raises(InvalidTransitionError):
        service.clock_in(1)


def test_break_and_clock_out_by_record_id(service, attendance_repo, clock):
    record = service.clock_in(1)

    clock.now = utc(2025, 1, 6, 12, 0)
    service.start_break(record.attendance_id)
    clock.now = utc(2025, 1, 6, 12, 30)
    service.end_break(record.attendance_id)
    clock.now = utc(2025, 1, 6, 17, 0)
    done = service.clock_out(record.attendance_id)

    assert done.status == AttendanceStatus.CLOCKED_OUT
    assert attendance_repo.get_by_id(record.attendance_id) == done
    assert service.get_active_record(1) is None


def test_transition_on_missing_record_is_not_found(service):
    with pytest.raises(NotFoundError):
        service.start_break(123)


def test_lost_write_race_raises_conflict(service, attendance_repo):
    record = service.clock_in(1)
    attendance_repo.lose_next_write = True
    with pytest.raises(ConflictError):
        service.clock_out(record.attendance_id)
    assert attendance_repo.get_by_id(record.attendance_id).status == AttendanceStatus.CLOCKED_IN


def test_start_break_without_active_session_is_rejected(service):
    with pytest.raises(InvalidTransitionError):
        service.perform_action(1, QuickAction.START_BREAK)


def test_perform_action_walks_a_kiosk_session(service, clock):
    service.perform_action(1, QuickAction.CLOCK_IN)
    assert service.allowed_actions(1) == {QuickAction.START_BREAK, QuickAction.CLOCK_OUT}

    clock.now = utc(2025, 1, 6, 12, 0)
    service.perform_action(1, "start_break")
    assert service.allowed_actions(1) == {QuickAction.END_BREAK, QuickAction.CLOCK_OUT}

    clock.now = utc(2025, 1, 6, 12, 10)
    done = service.perform_action(1, QuickAction.CLOCK_OUT)
    assert done.break_end_time == done.clock_out_time
    assert service.allowed_actions(1) == {QuickAction.CLOCK_IN}
