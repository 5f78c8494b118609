"""Engine policy settings shared by every environment.

Each value can be overridden from the environment (or a .env file).
EnginePolicy.from_settings() lifts them into one immutable value.
"""

import os

__all__ = [
    "GRACE_MINUTES",
    "NO_SHOW_THRESHOLD_MINUTES",
    "NO_SHOW_SCAN_INTERVAL_SECONDS",
    "NO_SHOW_SCANNER_ENABLED",
    "WEEKLY_OVERTIME_THRESHOLD",
    "OVERTIME_MULTIPLIER",
    "HOLIDAY_ACCRUAL_RATE",
    "PAID_BREAK_MINUTES",
    "MIN_REST_HOURS",
    "MAX_WEEKLY_HOURS",
    "DEFAULT_TAX_CODE",
    "LOG_LEVEL",
]

# Attendance
GRACE_MINUTES = int(os.getenv("GRACE_MINUTES", "5"))
NO_SHOW_THRESHOLD_MINUTES = int(os.getenv("NO_SHOW_THRESHOLD_MINUTES", "30"))
NO_SHOW_SCAN_INTERVAL_SECONDS = int(os.getenv("NO_SHOW_SCAN_INTERVAL_SECONDS", "300"))
NO_SHOW_SCANNER_ENABLED = bool(int(os.getenv("NO_SHOW_SCANNER_ENABLED", "1")))

# Pay
WEEKLY_OVERTIME_THRESHOLD = float(os.getenv("WEEKLY_OVERTIME_THRESHOLD", "40"))
OVERTIME_MULTIPLIER = float(os.getenv("OVERTIME_MULTIPLIER", "1.5"))
HOLIDAY_ACCRUAL_RATE = float(os.getenv("HOLIDAY_ACCRUAL_RATE", "0.1207"))
PAID_BREAK_MINUTES = int(os.getenv("PAID_BREAK_MINUTES", "30"))
DEFAULT_TAX_CODE = os.getenv("DEFAULT_TAX_CODE", "1257L")

# Working time
MIN_REST_HOURS = int(os.getenv("MIN_REST_HOURS", "11"))
MAX_WEEKLY_HOURS = float(os.getenv("MAX_WEEKLY_HOURS", "48"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
