from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import DateLike, TimeLike
from .lateness import LatenessResult, evaluate_lateness
from .strategies.base import ClockInStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.on_time_strategy import OnTimeStrategy


@dataclass
class ClockInStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def evaluate(
        self,
        *,
        now: datetime,
        scheduled_start: Optional[TimeLike],
        shift_date: Optional[DateLike],
        grace_minutes: int,
    ) -> LatenessResult:
        return evaluate_lateness(now, scheduled_start, shift_date, grace_minutes)

    def for_clock_in(self, lateness: LatenessResult) -> ClockInStrategy:
        if lateness.is_late:
            return LateStrategy()
        return OnTimeStrategy()
