from __future__ import annotations

from typing import Optional, Protocol


class NotificationRepository(Protocol):
    def create(
        self,
        *,
        recipient_id: int,
        kind: str,
        title: str,
        message: str,
        related_staff_id: Optional[int] = None,
        reference_id: Optional[int] = None,
    ) -> int:
        raise NotImplementedError
