"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_GRACE_PERIOD_END = "08:15:00"
DEFAULT_STANDARD_SHIFT_HOURS = 8

OVERTIME_MULTIPLIER = "1.5"

DEFAULT_WORK_DAYS_PER_WEEK = 5
DEFAULT_SHIFT_HOURS = 8
DEFAULT_BASE_START_HOUR = 8
DEFAULT_STAGGER_HOURS = 2
DEFAULT_CUTOFF_HOUR = 20

# Hours within this distance are a tie for the workload comparator.
WORKLOAD_TIE_HOURS = 2
DEFAULT_RELIABILITY = 100
IMBALANCE_THRESHOLD_HOURS = 4

TIME_FORMAT = "%H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"
