from datetime import date

from src.shiftpay.shiftpay.attendance.factory import ClockInStrategyFactory
from src.shiftpay.shiftpay.attendance.strategies.late_strategy import LateStrategy
from src.shiftpay.shiftpay.attendance.strategies.on_time_strategy import OnTimeStrategy
from tests.fakes import utc


def test_factory_clock_in_on_time_within_grace():
    factory = ClockInStrategyFactory()
    lateness = factory.evaluate(
        now=utc(2025, 1, 6, 9, 4, 59), scheduled_start="09:00", shift_date=date(2025, 1, 6), grace_minutes=5
    )
    strategy = factory.for_clock_in(lateness)

    assert isinstance(strategy, OnTimeStrategy)
    assert strategy.decide(lateness).note == "Arrived within grace period"


def test_factory_clock_in_late_after_grace():
    factory = ClockInStrategyFactory()
    lateness = factory.evaluate(
        now=utc(2025, 1, 6, 10, 5), scheduled_start="09:00", shift_date=date(2025, 1, 6), grace_minutes=5
    )
    strategy = factory.for_clock_in(lateness)
    decision = strategy.decide(lateness)

    assert isinstance(strategy, LateStrategy)
    assert decision.is_late
    assert decision.late_minutes == 65
    assert decision.note == "Late by 1h 5m"


def test_factory_unscheduled_is_on_time_without_note():
    factory = ClockInStrategyFactory()
    lateness = factory.evaluate(now=utc(2025, 1, 6, 13, 0), scheduled_start=None, shift_date=None, grace_minutes=5)
    decision = factory.for_clock_in(lateness).decide(lateness)

    assert not decision.is_late
    assert decision.note is None
