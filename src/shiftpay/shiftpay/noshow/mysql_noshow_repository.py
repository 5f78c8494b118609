from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Sequence

import mysql.connector
from mysql.connector import errorcode

from ..common.datetime_utils import from_utc_naive, to_utc_naive
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, normalize_mysql_time
from .model import NoShowRecord
from .repository import NoShowRepository

_COLUMNS = """
    no_show_id, staff_id, shift_id, shift_date, scheduled_start_time, detected_at,
    resolved, resolved_by, resolved_at, resolution_notes
"""


def _to_record(r: dict) -> NoShowRecord:
    return NoShowRecord(
        no_show_id=int(r["no_show_id"]),
        staff_id=int(r["staff_id"]),
        shift_id=int(r["shift_id"]),
        shift_date=r["shift_date"],
        scheduled_start_time=normalize_mysql_time(r["scheduled_start_time"]),
        detected_at=from_utc_naive(r["detected_at"]),
        resolved=bool(r.get("resolved")),
        resolved_by=r.get("resolved_by"),
        resolved_at=from_utc_naive(r.get("resolved_at")),
        resolution_notes=r.get("resolution_notes"),
    )


class MySQLNoShowRepository(NoShowRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_shift(self, *, shift_id: int, shift_date: date) -> Optional[NoShowRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM no_show_records WHERE shift_id=%s AND shift_date=%s",
                (int(shift_id), shift_date),
            )
            r = cur.fetchone()
            return _to_record(r) if r else None

    def create(
        self,
        *,
        staff_id: int,
        shift_id: int,
        shift_date: date,
        scheduled_start_time: time,
        detected_at: datetime,
    ) -> NoShowRecord:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO no_show_records(staff_id, shift_id, shift_date, scheduled_start_time, detected_at)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (int(staff_id), int(shift_id), shift_date, scheduled_start_time, to_utc_naive(detected_at)),
                )
                new_id = int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            # uq_no_show_shift_date: another scan got there first
            if e.errno == errorcode.ER_DUP_ENTRY:
                raise ConflictError(f"No-show already recorded for shift {shift_id} on {shift_date}") from e
            raise

        return NoShowRecord(
            no_show_id=new_id,
            staff_id=int(staff_id),
            shift_id=int(shift_id),
            shift_date=shift_date,
            scheduled_start_time=scheduled_start_time,
            detected_at=detected_at,
        )

    def resolve(
        self,
        *,
        no_show_id: int,
        resolved_by: int,
        resolved_at: datetime,
        notes: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE no_show_records
                SET resolved=1, resolved_by=%s, resolved_at=%s, resolution_notes=%s
                WHERE no_show_id=%s AND resolved=0
                """,
                (int(resolved_by), to_utc_naive(resolved_at), notes, int(no_show_id)),
            )
            return cur.rowcount > 0

    def list_unresolved(self, *, shift_date: Optional[date] = None) -> Sequence[NoShowRecord]:
        clauses = ["resolved=0"]
        params: list[object] = []
        if shift_date is not None:
            clauses.append("shift_date=%s")
            params.append(shift_date)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM no_show_records WHERE {where} ORDER BY shift_date DESC, scheduled_start_time",
                tuple(params),
            )
            return [_to_record(r) for r in cur.fetchall()]
