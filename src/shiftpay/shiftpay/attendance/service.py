from __future__ import annotations

import logging
from datetime import datetime, time
from typing import Callable, Optional

from ..common.datetime_utils import DateLike, TimeLike, business_now, business_today, ensure_utc, parse_local_time
from ..common.validators import optional_confidence
from ..core.enums import QuickAction
from ..core.exceptions import ConflictError, InvalidTransitionError, NotFoundError, ValidationError
from ..core.policy import EnginePolicy
from ..shifts.repository import ShiftRepository
from ..staff.repository import StaffRepository
from . import state_machine
from .factory import ClockInStrategyFactory
from .model import AttendanceRecord, NewAttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

Transition = Callable[[AttendanceRecord, datetime], AttendanceRecord]


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        staff: StaffRepository,
        shifts: ShiftRepository | None = None,
        *,
        strategy_factory: ClockInStrategyFactory | None = None,
        policy: EnginePolicy | None = None,
        clock: Callable[[], datetime] = business_now,
    ):
        self._attendance = attendance
        self._staff = staff
        self._shifts = shifts
        self._factory = strategy_factory or ClockInStrategyFactory()
        self._policy = policy or EnginePolicy()
        self._clock = clock

    def _now(self, now: datetime | None) -> datetime:
        return ensure_utc(now or self._clock())

    def _todays_schedule(self, staff_id: int, now: datetime) -> tuple[Optional[time], Optional[DateLike]]:
        if not self._shifts:
            return None, None
        shift = self._shifts.get_for_staff_and_date(staff_id=staff_id, shift_date=business_today(now))
        if not shift:
            return None, None
        return shift.start_time, shift.shift_date

    @staticmethod
    def _snapshot(scheduled_start: Optional[TimeLike]) -> Optional[time]:
        if not scheduled_start:
            return None
        try:
            return parse_local_time(scheduled_start)
        except ValidationError:
            return None

    def get_active_record(self, staff_id: int) -> Optional[AttendanceRecord]:
        return self._attendance.get_active_for_staff(int(staff_id))

    def allowed_actions(self, staff_id: int) -> frozenset[QuickAction]:
        return state_machine.allowed_actions(self.get_active_record(staff_id))

    def clock_in(
        self,
        staff_id: int,
        *,
        face_confidence: float | None = None,
        override_by: int | None = None,
        override_pin_used: bool = False,
        scheduled_start: TimeLike | None = None,
        shift_date: DateLike | None = None,
        grace_minutes: int | None = None,
        notes: str | None = None,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        now = self._now(now)

        staff = self._staff.get_by_id(int(staff_id))
        if not staff:
            raise NotFoundError(f"Staff member {staff_id} does not exist")

        if self._attendance.get_active_for_staff(staff.staff_id):
            raise InvalidTransitionError(f"{staff.name} is already clocked in")

        if scheduled_start is None:
            scheduled_start, shift_date = self._todays_schedule(staff.staff_id, now)
        elif shift_date is None:
            shift_date = business_today(now)

        grace = self._policy.grace_minutes if grace_minutes is None else int(grace_minutes)
        lateness = self._factory.evaluate(
            now=now, scheduled_start=scheduled_start, shift_date=shift_date, grace_minutes=grace
        )
        decision = self._factory.for_clock_in(lateness).decide(lateness)

        record = self._attendance.create(
            NewAttendanceRecord(
                staff_id=staff.staff_id,
                clock_in_time=now,
                scheduled_start_time=self._snapshot(scheduled_start),
                is_late=decision.is_late,
                late_minutes=decision.late_minutes,
                override_by=override_by,
                override_pin_used=bool(override_pin_used),
                face_match_confidence=optional_confidence(face_confidence),
                notes=notes or decision.note,
            )
        )
        logger.info(
            "Clock-in staff=%s record=%s late=%s late_minutes=%s",
            staff.staff_id, record.attendance_id, record.is_late, record.late_minutes,
        )
        return record

    def _transition(self, record_id: int, transition: Transition, now: datetime | None) -> AttendanceRecord:
        record = self._attendance.get_by_id(int(record_id))
        if not record:
            raise NotFoundError(f"Attendance record {record_id} does not exist")

        updated = transition(record, self._now(now))
        if not self._attendance.save_transition(updated, expected_status=record.status):
            raise ConflictError("Attendance record changed since it was read; reload and retry")

        logger.info("Record %s: %s -> %s", record.attendance_id, record.status.value, updated.status.value)
        return updated

    def start_break(self, record_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        return self._transition(record_id, state_machine.start_break, now)

    def end_break(self, record_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        return self._transition(record_id, state_machine.end_break, now)

    def clock_out(self, record_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        return self._transition(record_id, state_machine.clock_out, now)

    def perform_action(
        self,
        staff_id: int,
        action: QuickAction,
        *,
        now: datetime | None = None,
        **clock_in_options,
    ) -> AttendanceRecord:
        """Kiosk entry point: apply an action to the staff member's current session."""

        action = QuickAction(action)
        if action == QuickAction.CLOCK_IN:
            return self.clock_in(staff_id, now=now, **clock_in_options)

        active = self.get_active_record(staff_id)
        if not active:
            raise InvalidTransitionError("No active session for this staff member")

        handler = {
            QuickAction.START_BREAK: self.start_break,
            QuickAction.END_BREAK: self.end_break,
            QuickAction.CLOCK_OUT: self.clock_out,
        }[action]
        return handler(active.attendance_id, now=now)
