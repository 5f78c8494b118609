from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LeaveBalance:
    """Leave ledger row for one staff member and year.

    Salaried staff get a fixed entitlement; hourly-accrual staff build up
    accrued hours from hours worked. The ledger itself lives in the store.
    """

    staff_id: int
    year: int
    total_entitlement_hours: float = 0.0
    accrued_hours: float = 0.0
    used_hours: float = 0.0

    @property
    def available_hours(self) -> float:
        return self.total_entitlement_hours + self.accrued_hours - self.used_hours
