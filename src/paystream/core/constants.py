"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

from datetime import time

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DEFAULT_DEPARTMENTS = ("Engineering", "Sales", "Marketing", "HR", "Operations", "Finance")
DEFAULT_POSITIONS = ("Manager", "Developer", "Designer", "Executive", "Intern", "Lead")

SETTINGS_KEY_DEPARTMENTS = "departments"
SETTINGS_KEY_POSITIONS = "positions"

DEFAULT_LATE_CUTOFF = time(9, 0, 0)
DEFAULT_DEVICE_SOURCE = "DS-K1T320MFWX"
DEFAULT_CURRENCY_PREFIX = "Rs."
