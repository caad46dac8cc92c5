"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LATE_THRESHOLD_MINUTES = 5
DEFAULT_SESSION_TICK_SECONDS = 1.0
UNKNOWN_EMPLOYEE_NAME = "N/A"
