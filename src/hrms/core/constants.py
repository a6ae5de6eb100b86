"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PORT = 3000
DEFAULT_LIST_LIMIT = 200
DEFAULT_REPORT_DAYS = 30
DEFAULT_LATE_GRACE_MINUTES = 5
DEFAULT_WORKING_DAYS_PER_MONTH = 22

HEALTH_PAYLOAD = {"status": "ok", "message": "HRMS API is running"}
