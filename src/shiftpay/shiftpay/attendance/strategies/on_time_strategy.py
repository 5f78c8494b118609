from __future__ import annotations

from ..lateness import LatenessResult
from .base import ClockInStrategy, StatusDecision


class OnTimeStrategy(ClockInStrategy):
    """On-time clock-in, including arrivals inside the grace period."""

    def decide(self, lateness: LatenessResult) -> StatusDecision:
        note = "Arrived within grace period" if lateness.grace_applied else None
        return StatusDecision(is_late=False, late_minutes=0, note=note)
