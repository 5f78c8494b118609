from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .repository import NotificationRepository


class MySQLNotificationRepository(NotificationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        recipient_id: int,
        kind: str,
        title: str,
        message: str,
        related_staff_id: Optional[int] = None,
        reference_id: Optional[int] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO notifications(recipient_id, kind, title, message, related_staff_id, reference_id)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(recipient_id), kind, title, message, related_staff_id, reference_id),
            )
            return int(cur.lastrowid)
