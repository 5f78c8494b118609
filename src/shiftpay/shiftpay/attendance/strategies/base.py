from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..lateness import LatenessResult


@dataclass(frozen=True)
class StatusDecision:
    is_late: bool
    late_minutes: int = 0
    note: Optional[str] = None


class ClockInStrategy(ABC):
    """Strategy Pattern: encapsulate how a clock-in is flagged."""

    @abstractmethod
    def decide(self, lateness: LatenessResult) -> StatusDecision:
        raise NotImplementedError
