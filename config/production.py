import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")
DATA_DIR = os.getenv("DATA_DIR", "data")
STORAGE_KEY = os.getenv("STORAGE_KEY", "student-app-storage")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker"),
}

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "logs/attendance_tracker.log")

PROJECTION_MONTH_SCHOOL_DAYS = int(os.getenv("PROJECTION_MONTH_SCHOOL_DAYS", "20"))
PROJECTION_SCHOOL_DAYS_PER_WEEK = int(os.getenv("PROJECTION_SCHOOL_DAYS_PER_WEEK", "6"))
PROJECTION_TARGETS = tuple(float(t) for t in os.getenv("PROJECTION_TARGETS", "75,76").split(","))
