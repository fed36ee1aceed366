import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

# "file" keeps snapshots as JSON under DATA_DIR, "mysql" uses the kv_store table
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
DATA_DIR = os.getenv("DATA_DIR", "data")
STORAGE_KEY = os.getenv("STORAGE_KEY", "student-app-storage")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker"),
}

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = os.getenv("LOG_FILE") or None

PROJECTION_MONTH_SCHOOL_DAYS = int(os.getenv("PROJECTION_MONTH_SCHOOL_DAYS", "20"))
PROJECTION_SCHOOL_DAYS_PER_WEEK = int(os.getenv("PROJECTION_SCHOOL_DAYS_PER_WEEK", "6"))
PROJECTION_TARGETS = tuple(float(t) for t in os.getenv("PROJECTION_TARGETS", "75,76").split(","))
