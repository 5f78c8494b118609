"""Run one no-show scan against the configured database and exit.

Meant for cron-style scheduling when the in-process scanner is disabled
(NO_SHOW_SCANNER_ENABLED=0).
"""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.shiftpay.shiftpay.container import build_container
from src.shiftpay.shiftpay.core.policy import EnginePolicy


def main() -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    container = build_container(db_config=dict(settings.DB_CONFIG), policy=EnginePolicy.from_settings(settings))
    created = container.no_show_scanner.scan()
    for r in created:
        print(f"no-show #{r.no_show_id}: staff={r.staff_id} shift={r.shift_id} start={r.scheduled_start_time:%H:%M}")
    print(f"OK: {len(created)} new no-show(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
