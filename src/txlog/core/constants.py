"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_QUANTITY = 1
DEFAULT_SESSION_HOURS = 24
DEFAULT_POOL_SIZE = 5
DEFAULT_POOL_TIMEOUT = 10.0
POOL_RETRY_SECONDS = 0.05
TREND_MONTHS = 6
TOP_OFFICES_LIMIT = 10
GENERIC_ERROR_MESSAGE = "Server error."
