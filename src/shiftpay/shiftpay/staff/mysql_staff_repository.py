from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import StaffProfile
from .repository import StaffRepository

_COLUMNS = """
    staff_id, full_name, hourly_rate, contract_type, tax_code,
    contribution_category, department, job_title
"""


def _to_profile(r: dict) -> StaffProfile:
    return StaffProfile(
        staff_id=int(r["staff_id"]),
        name=r["full_name"],
        hourly_rate=float(r.get("hourly_rate") or 0),
        contract_type=r["contract_type"],
        tax_code=r.get("tax_code"),
        contribution_category=r.get("contribution_category"),
        department=r.get("department"),
        job_title=r.get("job_title"),
    )


class MySQLStaffRepository(StaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, staff_id: int) -> Optional[StaffProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM staff_profiles WHERE staff_id=%s", (int(staff_id),))
            r = cur.fetchone()
            return _to_profile(r) if r else None

    def list_all(self) -> Sequence[StaffProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM staff_profiles WHERE is_active=1 ORDER BY full_name")
            return [_to_profile(r) for r in cur.fetchall()]

    def list_by_department(self, department: str) -> Sequence[StaffProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM staff_profiles
                WHERE is_active=1 AND LOWER(department)=LOWER(%s)
                ORDER BY staff_id
                """,
                (department,),
            )
            return [_to_profile(r) for r in cur.fetchall()]
