from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Mapping

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[4] / "database" / "schema.sql"

# CREATE DATABASE / USE lines in schema.sql; the target comes from DB_CONFIG
_DATABASE_LEVEL = re.compile(r"(?i)^(CREATE\s+DATABASE|USE)\b")


def schema_statements(sql: str) -> list[str]:
    """Table statements of a schema file, in file order.

    Comment lines are dropped and statements are split on ';', which the
    schema never uses inside a literal.
    """

    body = "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))
    statements = (chunk.strip() for chunk in body.split(";"))
    return [s for s in statements if s and not _DATABASE_LEVEL.match(s)]


def _server_connection(target: DBConfig, *, database: bool):
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password)
    if database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def apply_schema(db_config: Mapping, *, schema_path: str | Path = SCHEMA_PATH) -> int:
    """Create the configured database if missing, then every table.

    Returns the number of table statements executed.
    """

    target = DBConfig.from_mapping(db_config)
    statements = schema_statements(Path(schema_path).read_text(encoding="utf-8"))

    conn = _server_connection(target, database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` "
            "CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        cur.execute(f"USE `{target.database}`")
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()

    logger.info("Applied %d schema statements to %s", len(statements), target.database)
    return len(statements)


def list_tables(db_config: Mapping) -> list[str]:
    conn = _server_connection(DBConfig.from_mapping(db_config), database=True)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return sorted(row[0] for row in cur.fetchall())
    finally:
        conn.close()
