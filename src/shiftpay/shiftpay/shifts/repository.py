from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def list_for_date(self, shift_date: date) -> Sequence[Shift]:
        raise NotImplementedError

    def list_range(self, *, start: date, end: date, staff_id: Optional[int] = None) -> Sequence[Shift]:
        raise NotImplementedError

    def get_for_staff_and_date(self, *, staff_id: int, shift_date: date) -> Optional[Shift]:
        """Earliest shift of the day for a staff member, if any."""

        raise NotImplementedError
