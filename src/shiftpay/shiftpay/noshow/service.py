from __future__ import annotations

from datetime import date, datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import business_now
from ..common.validators import require_positive_id
from ..core.exceptions import NotFoundError
from .model import NoShowRecord
from .repository import NoShowRepository


class NoShowService:
    """Reviewer-facing operations on detected no-shows."""

    def __init__(self, no_shows: NoShowRepository, *, clock: Callable[[], datetime] = business_now):
        self._no_shows = no_shows
        self._clock = clock

    def list_unresolved(self, *, shift_date: Optional[date] = None) -> Sequence[NoShowRecord]:
        return self._no_shows.list_unresolved(shift_date=shift_date)

    def resolve(self, *, no_show_id: int, resolved_by: int, notes: Optional[str] = None) -> None:
        reviewer = require_positive_id(resolved_by, "resolved_by")
        notes = notes.strip() if notes else None

        if not self._no_shows.resolve(
            no_show_id=int(no_show_id),
            resolved_by=reviewer,
            resolved_at=self._clock(),
            notes=notes or None,
        ):
            raise NotFoundError(f"No unresolved no-show with id {no_show_id}")
