"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MIN_LEAVE_NOTICE_DAYS = 7
DEFAULT_LIST_LIMIT = 500
ATTENDANCE_REPORT_MONTHS = 1
MAX_RATING = 5
