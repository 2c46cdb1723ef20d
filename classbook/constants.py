RECORDS_APP_NAME = "Student Record System"
ATTENDANCE_APP_NAME = "Attendance Tracker Pro"
ATTENDANCE_TITLE = "Attendance Tracker"
ATTENDANCE_SUBTITLE = "Track your attendance with ease"
FOOTER_TEXT = "© 2026 Created By: John Cleo Tinsay"

RECORDS_FILE = "class_records.csv"
EXPORT_FOLDER = "records"
COLUMNS = [
    "StudentID",
    "First Name",
    "Last Name",
    "LAB WORK 1",
    "LAB WORK 2",
    "LAB WORK 3",
    "PRELIM EXAM",
    "ATTENDANCE GRADE"
]

TIME_IN_FORMAT = "%B %d, %Y • %I:%M:%S %p"
TIME_IN_PLACEHOLDER = "Click submit to generate"
SIGNATURE_PLACEHOLDER = "Auto-generated"

RECORDS_WINDOW_WIDTH = 900
RECORDS_WINDOW_HEIGHT = 400
ATTENDANCE_WINDOW_WIDTH = 700
ATTENDANCE_WINDOW_HEIGHT = 650

DEFAULT_FONT = ("Segoe UI", 10)
TITLE_FONT = ("Segoe UI", 28, "bold")
SUBTITLE_FONT = ("Segoe UI", 13)
LABEL_FONT = ("Segoe UI", 12, "bold")
ENTRY_FONT = ("Segoe UI", 12)
SIGNATURE_FONT = ("Consolas", 11)
BUTTON_FONT = ("Segoe UI", 12, "bold")
FOOTER_FONT = ("Segoe UI", 10)

PRIMARY_COLOR = "#4f46e5"
SECONDARY_COLOR = "#6366f1"
DANGER_COLOR = "#ef4444"
DANGER_HOVER_COLOR = "#dc2626"
BACKGROUND_COLOR = "#f8fafc"
TEXT_COLOR = "#334155"
MUTED_COLOR = "#64748b"
READONLY_BG = "#f1f5f9"
