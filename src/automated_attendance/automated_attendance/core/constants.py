"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LOGIN_TIMEOUT_SECONDS = 8
NAVIGATION_DELAY_SECONDS = 1.5
TREND_DAYS = 7
INSTRUCTOR_SEARCH_MIN_CHARS = 2

DEFAULT_SCHEDULE = {"day": "Monday", "startTime": "8:00 AM", "endTime": "9:30 AM"}

STUDENT_DEFAULTS = {"course": "BSIT", "year": "1", "section": "A"}
INSTRUCTOR_DEFAULTS = {"department": "IT"}

# Session mirror keys (written independently, never as one record)
KEY_INSTRUCTOR_ID = "instructorId"
KEY_INSTRUCTOR_NAME = "instructorName"
KEY_STUDENT_ID = "studentId"
KEY_STUDENT_NAME = "studentName"
KEY_USER_TYPE = "userType"

MSG_MISSING_CREDENTIALS = "Please enter both username and password"
MSG_INVALID_CREDENTIALS = "Invalid credentials. Please check your ID and password."
MSG_CONNECTION_TIMEOUT = "Connection timeout. Please check your internet connection and try again."
MSG_SERVER_UNREACHABLE = "Failed to connect to server"
MSG_BAD_SCHEDULE_TIME = "Please correct time formats in schedules (HH:MM AM/PM)"
MSG_SAVE_COURSE_FAILED = "Failed to save course"
MSG_SAVE_IN_PROGRESS = "A save is already in progress"
MSG_BAD_SCHEDULE_DAY = "Please choose a valid day for every schedule"
MSG_MISSING_FIELDS = "Please fill in all fields"
