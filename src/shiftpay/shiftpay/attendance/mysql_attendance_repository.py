from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import from_utc_naive, to_utc_naive
from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, normalize_mysql_time
from .model import AttendanceRecord, NewAttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    attendance_id, staff_id, clock_in_time, break_start_time, break_end_time,
    clock_out_time, status, scheduled_start_time, is_late, late_minutes,
    override_by, override_pin_used, face_match_confidence, notes
"""


def _to_record(r: dict) -> AttendanceRecord:
    confidence = r.get("face_match_confidence")
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        staff_id=int(r["staff_id"]),
        clock_in_time=from_utc_naive(r["clock_in_time"]),
        status=AttendanceStatus(r["status"]),
        break_start_time=from_utc_naive(r.get("break_start_time")),
        break_end_time=from_utc_naive(r.get("break_end_time")),
        clock_out_time=from_utc_naive(r.get("clock_out_time")),
        scheduled_start_time=normalize_mysql_time(r.get("scheduled_start_time")),
        is_late=bool(r.get("is_late")),
        late_minutes=int(r.get("late_minutes") or 0),
        override_by=r.get("override_by"),
        override_pin_used=bool(r.get("override_pin_used")),
        face_match_confidence=float(confidence) if confidence is not None else None,
        notes=r.get("notes"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_records WHERE attendance_id=%s", (int(attendance_id),))
            r = cur.fetchone()
            return _to_record(r) if r else None

    def get_active_for_staff(self, staff_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE staff_id=%s AND status IN ('clocked_in', 'on_break')
                ORDER BY clock_in_time DESC
                LIMIT 1
                """,
                (int(staff_id),),
            )
            r = cur.fetchone()
            return _to_record(r) if r else None

    def create(self, record: NewAttendanceRecord) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    staff_id, clock_in_time, status, scheduled_start_time, is_late, late_minutes,
                    override_by, override_pin_used, face_match_confidence, notes
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.staff_id,
                    to_utc_naive(record.clock_in_time),
                    AttendanceStatus.CLOCKED_IN.value,
                    record.scheduled_start_time,
                    int(record.is_late),
                    record.late_minutes,
                    record.override_by,
                    int(record.override_pin_used),
                    record.face_match_confidence,
                    record.notes,
                ),
            )
            new_id = int(cur.lastrowid)

        return AttendanceRecord(
            attendance_id=new_id,
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

    def save_transition(self, record: AttendanceRecord, *, expected_status: AttendanceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET status=%s, break_start_time=%s, break_end_time=%s, clock_out_time=%s
                WHERE attendance_id=%s AND status=%s
                """,
                (
                    record.status.value,
                    to_utc_naive(record.break_start_time),
                    to_utc_naive(record.break_end_time),
                    to_utc_naive(record.clock_out_time),
                    record.attendance_id,
                    expected_status.value,
                ),
            )
            return cur.rowcount > 0

    def list_staff_ids_clocked_in_between(self, start: datetime, end: datetime) -> set[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT DISTINCT staff_id
                FROM attendance_records
                WHERE clock_in_time >= %s AND clock_in_time < %s
                """,
                (to_utc_naive(start), to_utc_naive(end)),
            )
            return {int(r["staff_id"]) for r in cur.fetchall()}

    def list_completed_between(self, start: datetime, end: datetime) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE status='clocked_out' AND clock_in_time >= %s AND clock_in_time < %s
                ORDER BY staff_id, clock_in_time
                """,
                (to_utc_naive(start), to_utc_naive(end)),
            )
            return [_to_record(r) for r in cur.fetchall()]
