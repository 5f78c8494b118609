from __future__ import annotations

from dataclasses import dataclass, field
from types import ModuleType
from typing import Any, Mapping

from . import constants as c


@dataclass(frozen=True)
class TaxPolicy:
    """PAYE bands and NIC thresholds, all expressed per weekly pay period."""

    default_tax_code: str = c.DEFAULT_TAX_CODE
    weeks_per_year: int = c.WEEKS_PER_YEAR
    annual_basic_rate_band: float = c.ANNUAL_BASIC_RATE_BAND
    annual_additional_rate_threshold: float = c.ANNUAL_ADDITIONAL_RATE_THRESHOLD
    basic_rate: float = c.BASIC_RATE
    higher_rate: float = c.HIGHER_RATE
    additional_rate: float = c.ADDITIONAL_RATE
    flat_rates: Mapping[str, float] = field(
        default_factory=lambda: {"BR": c.BASIC_RATE, "D0": c.HIGHER_RATE, "D1": c.ADDITIONAL_RATE}
    )

    nic_primary_threshold: float = c.NIC_PRIMARY_THRESHOLD_WEEKLY
    nic_upper_earnings_limit: float = c.NIC_UPPER_EARNINGS_LIMIT_WEEKLY
    nic_standard_category: str = c.NIC_STANDARD_CATEGORY
    nic_category_rates: Mapping[str, tuple[float, float]] = field(
        default_factory=lambda: dict(c.NIC_CATEGORY_RATES)
    )

    @property
    def basic_rate_limit(self) -> float:
        return self.annual_basic_rate_band / self.weeks_per_year

    @property
    def higher_rate_limit(self) -> float:
        return self.annual_additional_rate_threshold / self.weeks_per_year

    def nic_rates_for(self, category: str | None) -> tuple[float, float]:
        key = (category or "").strip().upper()
        if key in self.nic_category_rates:
            return self.nic_category_rates[key]
        return self.nic_category_rates[self.nic_standard_category]


@dataclass(frozen=True)
class EnginePolicy:
    """Every tunable rule of the engine, passed explicitly into each calculator."""

    grace_minutes: int = c.DEFAULT_LATE_GRACE_MINUTES
    no_show_threshold_minutes: int = c.DEFAULT_NO_SHOW_THRESHOLD_MINUTES
    no_show_scan_interval_seconds: int = c.DEFAULT_NO_SHOW_SCAN_INTERVAL_SECONDS
    weekly_overtime_threshold: float = c.DEFAULT_WEEKLY_OVERTIME_THRESHOLD
    overtime_multiplier: float = c.DEFAULT_OVERTIME_MULTIPLIER
    holiday_accrual_rate: float = c.DEFAULT_HOLIDAY_ACCRUAL_RATE
    paid_break_minutes: int = c.DEFAULT_PAID_BREAK_MINUTES
    min_rest_hours: int = c.DEFAULT_MIN_REST_HOURS
    max_weekly_hours: float = c.DEFAULT_MAX_WEEKLY_HOURS
    tax: TaxPolicy = field(default_factory=TaxPolicy)

    @property
    def paid_break_hours(self) -> float:
        return self.paid_break_minutes / 60

    @classmethod
    def from_settings(cls, settings: ModuleType | Any) -> "EnginePolicy":
        """Build a policy from a settings module, falling back to defaults."""

        defaults = cls()
        tax = TaxPolicy(default_tax_code=str(getattr(settings, "DEFAULT_TAX_CODE", defaults.tax.default_tax_code)))
        return cls(
            grace_minutes=int(getattr(settings, "GRACE_MINUTES", defaults.grace_minutes)),
            no_show_threshold_minutes=int(
                getattr(settings, "NO_SHOW_THRESHOLD_MINUTES", defaults.no_show_threshold_minutes)
            ),
            no_show_scan_interval_seconds=int(
                getattr(settings, "NO_SHOW_SCAN_INTERVAL_SECONDS", defaults.no_show_scan_interval_seconds)
            ),
            weekly_overtime_threshold=float(
                getattr(settings, "WEEKLY_OVERTIME_THRESHOLD", defaults.weekly_overtime_threshold)
            ),
            overtime_multiplier=float(getattr(settings, "OVERTIME_MULTIPLIER", defaults.overtime_multiplier)),
            holiday_accrual_rate=float(getattr(settings, "HOLIDAY_ACCRUAL_RATE", defaults.holiday_accrual_rate)),
            paid_break_minutes=int(getattr(settings, "PAID_BREAK_MINUTES", defaults.paid_break_minutes)),
            min_rest_hours=int(getattr(settings, "MIN_REST_HOURS", defaults.min_rest_hours)),
            max_weekly_hours=float(getattr(settings, "MAX_WEEKLY_HOURS", defaults.max_weekly_hours)),
            tax=tax,
        )
