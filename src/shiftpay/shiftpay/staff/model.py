from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.validators import normalize_category
from ..core.enums import ContractType
from ..payroll.tax import TaxCode


@dataclass(frozen=True)
class StaffProfile:
    """Domain entity: a staff member as seen by the pay engine.

    Note: Owned by the external staff directory; the engine only reads it.
    Tax code and contribution category are parsed on construction so the
    calculators always receive typed values.
    """

    staff_id: int
    name: str
    hourly_rate: float
    contract_type: ContractType = ContractType.SALARIED
    tax_code: Optional[TaxCode] = None
    contribution_category: Optional[str] = None
    department: Optional[str] = None
    job_title: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.tax_code, TaxCode):
            object.__setattr__(self, "tax_code", TaxCode.parse(self.tax_code))
        object.__setattr__(self, "contract_type", ContractType(self.contract_type))
        object.__setattr__(self, "contribution_category", normalize_category(self.contribution_category))

    @property
    def accrues_holiday_from_pay(self) -> bool:
        return self.contract_type == ContractType.HOURLY_ACCRUAL
