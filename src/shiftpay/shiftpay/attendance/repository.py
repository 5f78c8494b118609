from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, NewAttendanceRecord


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_active_for_staff(self, staff_id: int) -> Optional[AttendanceRecord]:
        """The staff member's non-terminal record, if any."""

        raise NotImplementedError

    def create(self, record: NewAttendanceRecord) -> AttendanceRecord:
        raise NotImplementedError

    def save_transition(self, record: AttendanceRecord, *, expected_status: AttendanceStatus) -> bool:
        """Write the record's mutable fields only if the stored status still
        equals expected_status. Returns False when nothing was updated."""

        raise NotImplementedError

    def list_staff_ids_clocked_in_between(self, start: datetime, end: datetime) -> set[int]:
        raise NotImplementedError

    def list_completed_between(self, start: datetime, end: datetime) -> Sequence[AttendanceRecord]:
        """Clocked-out records whose clock-in falls in [start, end)."""

        raise NotImplementedError
