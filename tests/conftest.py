from __future__ import annotations

import pytest

from src.shiftpay.shiftpay.core.enums import ContractType
from src.shiftpay.shiftpay.core.policy import EnginePolicy
from src.shiftpay.shiftpay.staff.model import StaffProfile
from tests.fakes import (
    InMemoryAttendance,
    InMemoryNoShows,
    InMemoryShifts,
    InMemoryStaff,
    RecordingNotifier,
)


@pytest.fixture
def policy() -> EnginePolicy:
    return EnginePolicy()


@pytest.fixture
def staff_repo() -> InMemoryStaff:
    repo = InMemoryStaff()
    repo.add(StaffProfile(staff_id=1, name="Alice Smith", hourly_rate=10.0, contract_type=ContractType.HOURLY_ACCRUAL))
    repo.add(StaffProfile(staff_id=2, name="Ben Jones", hourly_rate=12.5, tax_code="1257L", contribution_category="A"))
    repo.add(StaffProfile(staff_id=9, name="Maya Patel", hourly_rate=20.0, department="Management"))
    return repo


@pytest.fixture
def shifts_repo() -> InMemoryShifts:
    return InMemoryShifts()


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def no_show_repo() -> InMemoryNoShows:
    return InMemoryNoShows()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
