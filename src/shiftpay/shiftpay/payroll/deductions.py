from __future__ import annotations

from typing import Optional

from ..common.money import round2
from ..core.policy import TaxPolicy


def calculate_deduction(gross: float, category: Optional[str], policy: TaxPolicy) -> float:
    """Employee National Insurance for one week's gross pay.

    Nothing is due up to the primary threshold; the category's main rate
    applies up to the upper earnings limit and its upper rate beyond it.
    Unknown categories use the standard category's rates.
    """

    if gross <= policy.nic_primary_threshold:
        return 0.0

    main_rate, upper_rate = policy.nic_rates_for(category)
    main_band = min(gross, policy.nic_upper_earnings_limit) - policy.nic_primary_threshold
    upper_band = max(0.0, gross - policy.nic_upper_earnings_limit)
    return round2(main_band * main_rate + upper_band * upper_rate)


def calculate_net_pay(gross: float, income_tax: float, deduction: float) -> float:
    return round2(round2(gross) - round2(income_tax) - round2(deduction))
