"""Example: drive the engine through the service layer (no Flask).

Controllers are a thin layer; everything below is plain service calls.
"""

import importlib
from datetime import timedelta

from config import get_settings_module

from src.shiftpay.shiftpay.common.datetime_utils import business_today
from src.shiftpay.shiftpay.container import build_container
from src.shiftpay.shiftpay.core.policy import EnginePolicy


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, policy=EnginePolicy.from_settings(settings))

    today = business_today()
    week_start = today - timedelta(days=today.weekday())
    week_end = week_start + timedelta(days=6)

    print(sorted(a.value for a in container.attendance_service.allowed_actions(1)))
    for s in container.payroll_service.build_summaries(start=week_start, end=week_end):
        print(f"{s.staff_name}: {s.total_hours_worked:.2f}h gross={s.gross_pay:.2f} net={s.net_pay:.2f}")
    for w in container.compliance_service.warnings_for_range(start=week_start, end=week_end):
        print(w.message)


if __name__ == "__main__":
    main()
