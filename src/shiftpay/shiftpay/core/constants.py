"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
Every value can be overridden through the settings module (see EnginePolicy).
"""

DEFAULT_LATE_GRACE_MINUTES = 5
DEFAULT_NO_SHOW_THRESHOLD_MINUTES = 30
DEFAULT_NO_SHOW_SCAN_INTERVAL_SECONDS = 5 * 60

DEFAULT_WEEKLY_OVERTIME_THRESHOLD = 40.0
DEFAULT_OVERTIME_MULTIPLIER = 1.5
DEFAULT_PAID_BREAK_MINUTES = 30

# UK statutory holiday accrual for hours-based contracts (12.07%)
DEFAULT_HOLIDAY_ACCRUAL_RATE = 0.1207

# Working Time Regulations
DEFAULT_MIN_REST_HOURS = 11
DEFAULT_MAX_WEEKLY_HOURS = 48.0

# Leave: 28 days x 8h for salaried staff
HOURS_PER_LEAVE_DAY = 8
SALARIED_ANNUAL_LEAVE_DAYS = 28

# PAYE / NIC (2024-25 tax year)
WEEKS_PER_YEAR = 52
DEFAULT_TAX_CODE = "1257L"
ANNUAL_BASIC_RATE_BAND = 37_700
ANNUAL_ADDITIONAL_RATE_THRESHOLD = 125_140
BASIC_RATE = 0.20
HIGHER_RATE = 0.40
ADDITIONAL_RATE = 0.45

NIC_PRIMARY_THRESHOLD_WEEKLY = 242.0
NIC_UPPER_EARNINGS_LIMIT_WEEKLY = 967.0
NIC_STANDARD_CATEGORY = "A"

# category -> (main rate, upper rate)
NIC_CATEGORY_RATES = {
    "A": (0.08, 0.02),
    "B": (0.0185, 0.02),
    "C": (0.0, 0.0),
    "H": (0.08, 0.02),
    "J": (0.02, 0.02),
    "M": (0.08, 0.02),
    "V": (0.08, 0.02),
    "X": (0.0, 0.0),
    "Z": (0.02, 0.02),
}

# Staff directory department whose members receive manager notifications
MANAGEMENT_DEPARTMENT = "management"
