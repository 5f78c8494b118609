import os

from .config import *  # noqa: F401,F403

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "shiftpay_test"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
# Tests drive scans explicitly
NO_SHOW_SCANNER_ENABLED = False
