import pytest

from src.shiftpay.shiftpay.attendance import state_machine
from src.shiftpay.shiftpay.attendance.model import AttendanceRecord
from src.shiftpay.shiftpay.core.enums import AttendanceStatus, QuickAction
from src.shiftpay.shiftpay.core.exceptions import InvalidTransitionError, ValidationError
from tests.fakes import utc


def _clocked_in() -> AttendanceRecord:
    return AttendanceRecord(attendance_id=1, staff_id=1, clock_in_time=utc(2025, 1, 6, 9, 0))


def test_full_session_with_break():
    rec = state_machine.start_break(_clocked_in(), utc(2025, 1, 6, 12, 0))
    assert rec.status == AttendanceStatus.ON_BREAK

    rec = state_machine.end_break(rec, utc(2025, 1, 6, 12, 30))
    assert rec.status == AttendanceStatus.CLOCKED_IN
    assert rec.break_minutes == 30

    rec = state_machine.clock_out(rec, utc(2025, 1, 6, 17, 0))
    assert rec.status == AttendanceStatus.CLOCKED_OUT
    assert rec.clock_out_time == utc(2025, 1, 6, 17, 0)


def test_clock_out_during_break_closes_the_break():
    on_break = state_machine.start_break(_clocked_in(), utc(2025, 1, 6, 12, 0))
    rec = state_machine.clock_out(on_break, utc(2025, 1, 6, 12, 20))

    assert rec.status == AttendanceStatus.CLOCKED_OUT
    assert rec.break_end_time == rec.clock_out_time
    assert rec.break_minutes == 20


def test_end_break_without_break_is_rejected():
    with pytest.raises(InvalidTransitionError):
        state_machine.end_break(_clocked_in(), utc(2025, 1, 6, 12, 0))


def test_only_one_break_per_session():
    rec = state_machine.start_break(_clocked_in(), utc(2025, 1, 6, 12, 0))
    rec = state_machine.end_break(rec, utc(2025, 1, 6, 12, 30))
    with pytest.raises(InvalidTransitionError):
        state_machine.start_break(rec, utc(2025, 1, 6, 14, 0))


def test_clocked_out_is_terminal():
    done = state_machine.clock_out(_clocked_in(), utc(2025, 1, 6, 17, 0))
    for transition in (state_machine.start_break, state_machine.end_break, state_machine.clock_out):
        with pytest.raises(InvalidTransitionError):
            transition(done, utc(2025, 1, 6, 18, 0))


def test_impossible_states_cannot_be_built():
    with pytest.raises(ValidationError):
        AttendanceRecord(attendance_id=1, staff_id=1, clock_in_time=utc(2025, 1, 6, 9, 0), status=AttendanceStatus.ON_BREAK)
    with pytest.raises(ValidationError):
        AttendanceRecord(
            attendance_id=1, staff_id=1, clock_in_time=utc(2025, 1, 6, 9, 0), status=AttendanceStatus.CLOCKED_OUT
        )
    with pytest.raises(ValidationError):
        AttendanceRecord(attendance_id=1, staff_id=1, clock_in_time=utc(2025, 1, 6, 9, 0), late_minutes=-1)


def test_allowed_actions_follow_the_quick_action_rule():
    assert state_machine.allowed_actions(None) == {QuickAction.CLOCK_IN}

    active = _clocked_in()
    assert state_machine.allowed_actions(active) == {QuickAction.START_BREAK, QuickAction.CLOCK_OUT}

    on_break = state_machine.start_break(active, utc(2025, 1, 6, 12, 0))
    assert state_machine.allowed_actions(on_break) == {QuickAction.END_BREAK, QuickAction.CLOCK_OUT}

    after_break = state_machine.end_break(on_break, utc(2025, 1, 6, 12, 30))
    assert state_machine.allowed_actions(after_break) == {QuickAction.CLOCK_OUT}

    done = state_machine.clock_out(after_break, utc(2025, 1, 6, 17, 0))
    assert state_machine.allowed_actions(done) == {QuickAction.CLOCK_IN}
