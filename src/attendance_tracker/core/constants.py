"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STORAGE_KEY = "student-app-storage"
SNAPSHOT_VERSION = 0

WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
SCHOOL_DAYS = WEEKDAYS[:6]

DEFAULT_SLOT_TIMES = (
    ("09:10", "10:00"),
    ("10:00", "10:50"),
    ("10:50", "11:40"),
    ("11:40", "12:30"),
    ("13:20", "14:10"),
    ("14:10", "15:00"),
    ("15:00", "15:50"),
)

SUBJECT_COLORS = (
    "#8B5CF6", "#06B6D4", "#10B981", "#F59E0B", "#EF4444", "#EC4899",
    "#8B5A2B", "#6366F1", "#84CC16", "#F97316", "#14B8A6", "#A855F7",
)
FREE_PERIOD_COLOR = "#94A3B8"

UNKNOWN_SUBJECT = "Unknown Subject"
FREE_PERIOD = "Free Period"

# Projection heuristic defaults
DEFAULT_MONTH_SCHOOL_DAYS = 20
DEFAULT_SCHOOL_DAYS_PER_WEEK = 6
DEFAULT_TARGETS = (75, 76)

# Percentage bands used for status colouring
GOOD_THRESHOLD = 75
WARNING_THRESHOLD = 60
