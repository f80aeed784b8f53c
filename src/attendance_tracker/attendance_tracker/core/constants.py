"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_NOTICE_DISMISS_SECONDS = 5
DEFAULT_SUBMIT_GRACE_SECONDS = 0.5
DEFAULT_API_TIMEOUT_SECONDS = 10
DEFAULT_DRAFT_IDLE_SECONDS = 60 * 60
DEFAULT_MAX_DRAFTS = 500

TRANSPORT_ERROR_MESSAGE = "Could not reach the attendance server. Please try again."
UNMARKED_STUDENTS_MESSAGE = "Cannot finish: there are unmarked students"

CSV_HEADER = ("Student ID", "Student Name", "Attendance Status")
CSV_DATE_HEADER = "Attendance Date"
