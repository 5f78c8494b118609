from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Protocol, Sequence

from .model import NoShowRecord


class NoShowRepository(Protocol):
    def get_for_shift(self, *, shift_id: int, shift_date: date) -> Optional[NoShowRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        staff_id: int,
        shift_id: int,
        shift_date: date,
        scheduled_start_time: time,
        detected_at: datetime,
    ) -> NoShowRecord:
        raise NotImplementedError

    def resolve(
        self,
        *,
        no_show_id: int,
        resolved_by: int,
        resolved_at: datetime,
        notes: Optional[str] = None,
    ) -> bool:
        """Mark an unresolved record as resolved. False if missing or already resolved."""

        raise NotImplementedError

    def list_unresolved(self, *, shift_date: Optional[date] = None) -> Sequence[NoShowRecord]:
        raise NotImplementedError
