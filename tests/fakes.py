"""In-memory stand-ins for the MySQL repositories, shared by the test suites."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime, time, timezone
from typing import Optional

from src.shiftpay.shiftpay.attendance.model import AttendanceRecord, NewAttendanceRecord
from src.shiftpay.shiftpay.core.enums import AttendanceStatus
from src.shiftpay.shiftpay.noshow.model import NoShowRecord
from src.shiftpay.shiftpay.shifts.model import Shift
from src.shiftpay.shiftpay.staff.model import StaffProfile


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class FixedClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@dataclass
class InMemoryStaff:
    by_id: dict[int, StaffProfile] = field(default_factory=dict)

    def add(self, profile: StaffProfile) -> StaffProfile:
        self.by_id[profile.staff_id] = profile
        return profile

    def get_by_id(self, staff_id: int) -> Optional[StaffProfile]:
        return self.by_id.get(staff_id)

    def list_all(self):
        return sorted(self.by_id.values(), key=lambda s: s.name)

    def list_by_department(self, department: str):
        return [s for s in self.by_id.values() if (s.department or "").lower() == department.lower()]


@dataclass
class InMemoryShifts:
    shifts: list[Shift] = field(default_factory=list)
    fail: bool = False

    def add(self, shift: Shift) -> Shift:
        self.shifts.append(shift)
        return shift

    def list_for_date(self, shift_date: date):
        if self.fail:
            raise RuntimeError("shift store unavailable")
        return [s for s in self.shifts if s.shift_date == shift_date]

    def list_range(self, *, start: date, end: date, staff_id: Optional[int] = None):
        return [
            s for s in self.shifts
            if start <= s.shift_date <= end and (staff_id is None or s.staff_id == staff_id)
        ]

    def get_for_staff_and_date(self, *, staff_id: int, shift_date: date) -> Optional[Shift]:
        matches = [s for s in self.shifts if s.staff_id == staff_id and s.shift_date == shift_date]
        return min(matches, key=lambda s: s.start_time) if matches else None


class InMemoryAttendance:
    def __init__(self):
        self.records: dict[int, AttendanceRecord] = {}
        self._id = 0
        # Simulates another writer changing the row between read and write
        self.lose_next_write = False

    def add(self, record: AttendanceRecord) -> AttendanceRecord:
        self.records[record.attendance_id] = record
        self._id = max(self._id, record.attendance_id)
        return record

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self.records.get(attendance_id)

    def get_active_for_staff(self, staff_id: int) -> Optional[AttendanceRecord]:
        active = [r for r in self.records.values() if r.staff_id == staff_id and r.is_active]
        return max(active, key=lambda r: r.clock_in_time) if active else None

    def create(self, record: NewAttendanceRecord) -> AttendanceRecord:
        self._id += 1
        created = AttendanceRecord(
            attendance_id=self._id,
            staff_id=record.staff_id,
            clock_in_time=record.clock_in_time,
            scheduled_start_time=record.scheduled_start_time,
            is_late=record.is_late,
            late_minutes=record.late_minutes,
            override_by=record.override_by,
            override_pin_used=record.override_pin_used,
            face_match_confidence=record.face_match_confidence,
            notes=record.notes,
        )
        self.records[self._id] = created
        return created

    def save_transition(self, record: AttendanceRecord, *, expected_status: AttendanceStatus) -> bool:
        stored = self.records.get(record.attendance_id)
        if stored is None or stored.status != expected_status or self.lose_next_write:
            self.lose_next_write = False
            return False
        self.records[record.attendance_id] = record
        return True

    def list_staff_ids_clocked_in_between(self, start: datetime, end: datetime) -> set[int]:
        return {r.staff_id for r in self.records.values() if start <= r.clock_in_time < end}

    def list_completed_between(self, start: datetime, end: datetime):
        return [
            r for r in self.records.values()
            if r.status == AttendanceStatus.CLOCKED_OUT and start <= r.clock_in_time < end
        ]


class InMemoryNoShows:
    def __init__(self):
        self.records: dict[int, NoShowRecord] = {}
        self._id = 0
        self.fail_for_shift: set[int] = set()

    def get_for_shift(self, *, shift_id: int, shift_date: date) -> Optional[NoShowRecord]:
        if shift_id in self.fail_for_shift:
            raise RuntimeError("lookup failed")
        for r in self.records.values():
            if r.shift_id == shift_id and r.shift_date == shift_date:
                return r
        return None

    def create(self, *, staff_id: int, shift_id: int, shift_date: date, scheduled_start_time: time, detected_at: datetime):
        self._id += 1
        record = NoShowRecord(
            no_show_id=self._id,
            staff_id=staff_id,
            shift_id=shift_id,
            shift_date=shift_date,
            scheduled_start_time=scheduled_start_time,
            detected_at=detected_at,
        )
        self.records[self._id] = record
        return record

    def resolve(self, *, no_show_id: int, resolved_by: int, resolved_at: datetime, notes: Optional[str] = None) -> bool:
        r = self.records.get(no_show_id)
        if r is None or r.resolved:
            return False
        self.records[no_show_id] = replace(
            r, resolved=True, resolved_by=resolved_by, resolved_at=resolved_at, resolution_notes=notes
        )
        return True

    def list_unresolved(self, *, shift_date: Optional[date] = None):
        return [
            r for r in self.records.values()
            if not r.resolved and (shift_date is None or r.shift_date == shift_date)
        ]


class InMemoryNotifications:
    def __init__(self):
        self.rows: list[dict] = []

    def create(self, **row) -> int:
        self.rows.append(row)
        return len(self.rows)


class RecordingNotifier:
    def __init__(self, fail: bool = False):
        self.calls: list[tuple[NoShowRecord, str]] = []
        self.fail = fail

    def notify_no_show(self, record: NoShowRecord, staff_name: str) -> None:
        if self.fail:
            raise RuntimeError("notification channel down")
        self.calls.append((record, staff_name))
