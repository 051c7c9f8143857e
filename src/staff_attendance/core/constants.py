"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

REPORT_COLUMNS = ("Date", "Employee", "Status", "Reason")
REPORT_SHEET_NAME = "Attendance"
REPORT_FILE_PREFIX = "Attendance"

SUMMARY_EMPLOYEE_LABEL = "→ Summary"
EMPTY_PLACEHOLDER = "-"

DEFAULT_MESSAGE_TIMEOUT_MS = 3000
SESSION_TOKEN_KEY = "attendance_session"
DEFAULT_MAX_SESSIONS = 1000
