import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

STORAGE_BACKEND = "file"
DATA_DIR = os.getenv("DATA_DIR", "data-test")
STORAGE_KEY = "student-app-storage"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker_test"),
}

AUTO_INIT_DB = False

LOG_LEVEL = "WARNING"
LOG_FILE = None

PROJECTION_MONTH_SCHOOL_DAYS = 20
PROJECTION_SCHOOL_DAYS_PER_WEEK = 6
PROJECTION_TARGETS = (75.0, 76.0)
