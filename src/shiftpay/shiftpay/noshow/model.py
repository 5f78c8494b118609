from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional


@dataclass(frozen=True)
class NoShowRecord:
    """Domain entity: a scheduled shift nobody clocked in for.

    At most one exists per (shift_id, shift_date). Records are resolved by a
    reviewer, never deleted.
    """

    no_show_id: int
    staff_id: int
    shift_id: int
    shift_date: date
    scheduled_start_time: time
    detected_at: datetime
    resolved: bool = False
    resolved_by: Optional[int] = None
    resolved_at: Optional[datetime] = None
    resolution_notes: Optional[str] = None
