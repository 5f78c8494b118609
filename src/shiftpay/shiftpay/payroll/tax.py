"""PAYE income tax for a weekly pay period.

Tax codes are parsed once into a TaxCode value; the calculation then works on
the typed value. Band limits come from TaxPolicy so they can be changed per
tax year without touching the code.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

from ..common.money import round2
from ..core.enums import TaxCodeKind
from ..core.policy import TaxPolicy

_STANDARD_CODE = re.compile(r"^(\d+)[A-Z]")
_FLAT_RATE_CODES = frozenset({"BR", "D0", "D1"})


@dataclass(frozen=True)
class TaxCode:
    code: str
    kind: TaxCodeKind
    # Leading digit run of a standard code; None means "use the default code".
    allowance_units: Optional[int] = None

    @classmethod
    def parse(cls, raw: Optional[str]) -> "TaxCode":
        code = re.sub(r"\s+", "", raw or "").upper()

        if code in _FLAT_RATE_CODES:
            return cls(code=code, kind=TaxCodeKind.FLAT_RATE)
        if code == "NT":
            return cls(code=code, kind=TaxCodeKind.NO_TAX)
        if code == "0T":
            return cls(code=code, kind=TaxCodeKind.ZERO_ALLOWANCE, allowance_units=0)

        m = _STANDARD_CODE.match(code)
        if m:
            return cls(code=code, kind=TaxCodeKind.STANDARD, allowance_units=int(m.group(1)))

        # Unknown or missing: standard bands with the default allowance
        return cls(code=code, kind=TaxCodeKind.STANDARD)

    def __str__(self) -> str:
        return self.code


TaxCodeLike = Union[TaxCode, str, None]


def as_tax_code(value: TaxCodeLike) -> TaxCode:
    return value if isinstance(value, TaxCode) else TaxCode.parse(value)


def weekly_personal_allowance(tax_code: TaxCodeLike, policy: TaxPolicy) -> float:
    """Allowance for one week: code digits x 10 / weeks per year."""

    code = as_tax_code(tax_code)
    if code.kind == TaxCodeKind.ZERO_ALLOWANCE:
        return 0.0
    units = code.allowance_units
    if units is None:
        units = TaxCode.parse(policy.default_tax_code).allowance_units or 0
    return units * 10 / policy.weeks_per_year


def calculate_income_tax(gross: float, tax_code: TaxCodeLike, policy: TaxPolicy) -> float:
    """Income tax due on one week's gross pay, rounded to pennies."""

    if gross <= 0:
        return 0.0

    code = as_tax_code(tax_code)
    if code.kind == TaxCodeKind.NO_TAX:
        return 0.0
    if code.kind == TaxCodeKind.FLAT_RATE:
        return round2(gross * policy.flat_rates[code.code])

    taxable = max(0.0, gross - weekly_personal_allowance(code, policy))
    basic_limit = policy.basic_rate_limit
    higher_limit = policy.higher_rate_limit

    basic_band = min(taxable, basic_limit)
    higher_band = max(0.0, min(taxable, higher_limit) - basic_limit)
    additional_band = max(0.0, taxable - higher_limit)

    tax = (
        basic_band * policy.basic_rate
        + higher_band * policy.higher_rate
        + additional_band * policy.additional_rate
    )
    return round2(tax)
