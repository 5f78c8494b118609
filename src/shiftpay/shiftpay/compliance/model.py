from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import WarningType


@dataclass(frozen=True)
class ComplianceWarning:
    kind: WarningType
    staff_id: int
    staff_name: str
    message: str
    shift_date: date
    # Rest-period violations only
    previous_shift_end: Optional[str] = None
    next_shift_start: Optional[str] = None
    rest_hours: Optional[int] = None
    # Weekly-hours warnings only
    weekly_hours: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "type": self.kind.value,
            "staff_id": self.staff_id,
            "staff_name": self.staff_name,
            "message": self.message,
            "shift_date": self.shift_date.isoformat(),
            "previous_shift_end": self.previous_shift_end,
            "next_shift_start": self.next_shift_start,
            "rest_hours": self.rest_hours,
            "weekly_hours": self.weekly_hours,
        }
