from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import StaffProfile


class StaffRepository(Protocol):
    """Read-only view of the staff directory.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def get_by_id(self, staff_id: int) -> Optional[StaffProfile]:
        raise NotImplementedError

    def list_all(self) -> Sequence[StaffProfile]:
        raise NotImplementedError

    def list_by_department(self, department: str) -> Sequence[StaffProfile]:
        raise NotImplementedError
