from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, normalize_mysql_time
from .model import Shift
from .repository import ShiftRepository


def _to_shift(r: dict) -> Shift:
    return Shift(
        shift_id=int(r["shift_id"]),
        staff_id=int(r["staff_id"]),
        shift_date=r["shift_date"],
        start_time=normalize_mysql_time(r["start_time"]),
        end_time=normalize_mysql_time(r["end_time"]),
        shift_type=r.get("shift_type") or "morning",
    )


class MySQLShiftRepository(ShiftRepository):
    """Published shifts only; drafts are invisible to the engine."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_date(self, shift_date: date) -> Sequence[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT shift_id, staff_id, shift_date, shift_type, start_time, end_time
                FROM shifts
                WHERE shift_date=%s AND is_published=1
                ORDER BY start_time, staff_id
                """,
                (shift_date,),
            )
            return [_to_shift(r) for r in cur.fetchall()]

    def list_range(self, *, start: date, end: date, staff_id: Optional[int] = None) -> Sequence[Shift]:
        clauses = ["shift_date BETWEEN %s AND %s", "is_published=1"]
        params: list[object] = [start, end]
        if staff_id is not None:
            clauses.append("staff_id=%s")
            params.append(int(staff_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT shift_id, staff_id, shift_date, shift_type, start_time, end_time
                FROM shifts
                WHERE {where}
                ORDER BY shift_date, start_time, staff_id
                """,
                tuple(params),
            )
            return [_to_shift(r) for r in cur.fetchall()]

    def get_for_staff_and_date(self, *, staff_id: int, shift_date: date) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT shift_id, staff_id, shift_date, shift_type, start_time, end_time
                FROM shifts
                WHERE staff_id=%s AND shift_date=%s AND is_published=1
                ORDER BY start_time
                LIMIT 1
                """,
                (int(staff_id), shift_date),
            )
            r = cur.fetchone()
            return _to_shift(r) if r else None
