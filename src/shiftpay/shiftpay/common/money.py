from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

_CENT = Decimal("0.01")


def round2(value: float) -> float:
    """Round half-up to 2 decimal places (7.005 -> 7.01)."""
    return float(Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def fmt2(value: float) -> str:
    """Fixed 2dp string of a value already rounded with round2."""
    return f"{Decimal(str(round2(value))).quantize(_CENT)}"
