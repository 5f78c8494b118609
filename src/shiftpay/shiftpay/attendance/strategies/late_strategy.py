from __future__ import annotations

from ..lateness import LatenessResult, format_late_minutes
from .base import ClockInStrategy, StatusDecision


class LateStrategy(ClockInStrategy):
    """Late clock-in."""

    def decide(self, lateness: LatenessResult) -> StatusDecision:
        return StatusDecision(
            is_late=True,
            late_minutes=lateness.late_minutes,
            note=f"Late by {format_late_minutes(lateness.late_minutes)}",
        )
