"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60
HOURS_DECIMALS = 2

# Night window for overtime: 19:00 - 05:59
NIGHT_START_HOUR = 19
NIGHT_END_HOUR = 6

DEFAULT_LOCAL_TIMEZONE = "America/Bogota"
DEFAULT_OVERTIME_COUNTER = "minute"
DEFAULT_RECORD_LIST_LIMIT = 200
