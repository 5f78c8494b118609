from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Optional

from ..common.datetime_utils import parse_local_time
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (connection, cursor) for one unit of work.

    Commits when the block exits cleanly and rolls back when it raises.
    """

    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=dictionary)
    try:
        yield conn, cur
        conn.commit()
    except Exception:
        logger.debug("Rolling back failed unit of work", exc_info=True)
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def normalize_mysql_time(value: Any) -> Optional[time]:
    # TIME columns arrive as timedelta, time or str depending on the connector
    if value is None or isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        minutes, seconds = divmod(int(value.total_seconds()) % 86400, 60)
        return time(*divmod(minutes, 60), seconds)
    if isinstance(value, str):
        return parse_local_time(value)
    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
