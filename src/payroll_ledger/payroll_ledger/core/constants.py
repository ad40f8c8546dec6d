"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

OVERTIME_HOURS_PER_DAY = Decimal(8)
DAY_RULE_VERSION = 1

MIN_PASSWORD_LENGTH = 6
RECENT_CHECKINS_LIMIT = 5
OVERVIEW_RECENT_LIMIT = 10
SUMMARY_MAX_WORKERS = 6

DEFAULT_PLACE_NAME = "My Company"
DEFAULT_MANAGER_NAME = "Manager"

# Largest values the DECIMAL columns hold (amount 12,2; days and hours 10,2).
MONEY_PLACES = 2
MAX_AMOUNT = Decimal("9999999999.99")
MAX_DAYS = Decimal("99999999.99")
MAX_HOURS = Decimal("99999999.99")
