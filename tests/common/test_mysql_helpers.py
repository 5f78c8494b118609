import logging
from datetime import date, time, timedelta

import pytest

from src.shiftpay.shiftpay.database.bootstrap import SCHEMA_PATH, schema_statements
from src.shiftpay.shiftpay.database.connection import DBConfig
from src.shiftpay.shiftpay.database.mysql_base import normalize_mysql_time
from src.shiftpay.shiftpay.noshow.model import NoShowRecord
from src.shiftpay.shiftpay.notifications.notifier import LoggingNotifier
from tests.fakes import utc


def test_schema_splits_into_create_table_statements():
    statements = schema_statements(SCHEMA_PATH.read_text(encoding="utf-8"))

    assert all(s.upper().startswith("CREATE TABLE") for s in statements)
    names = [s.split()[5] for s in statements]
    assert names == [
        "staff_profiles",
        "shifts",
        "attendance_records",
        "no_show_records",
        "notifications",
        "leave_balances",
    ]


def test_database_level_statements_and_comments_are_skipped():
    sql = "-- setup\nCREATE DATABASE x;\nUSE x;\nCREATE TABLE a (id INT);\n\n-- done\nCREATE TABLE b (id INT);\n"
    assert schema_statements(sql) == ["CREATE TABLE a (id INT)", "CREATE TABLE b (id INT)"]


@pytest.mark.parametrize(
    "raw, expected",
    [
        (time(8, 30), time(8, 30)),
        (timedelta(hours=8, minutes=30), time(8, 30)),
        ("08:30:00", time(8, 30)),
        (None, None),
    ],
)
def test_normalize_mysql_time(raw, expected):
    assert normalize_mysql_time(raw) == expected


def test_db_config_defaults():
    cfg = DBConfig.from_mapping({"host": "db", "port": "3307"})
    assert cfg.port == 3307
    assert cfg.database == "shiftpay"


def test_logging_notifier_logs_a_warning(caplog):
    record = NoShowRecord(
        no_show_id=1,
        staff_id=1,
        shift_id=2,
        shift_date=date(2025, 1, 6),
        scheduled_start_time=time(9, 0),
        detected_at=utc(2025, 1, 6, 9, 30),
    )
    with caplog.at_level(logging.WARNING):
        LoggingNotifier().notify_no_show(record, "Alice Smith")
    assert "No-show: Alice Smith" in caplog.text
