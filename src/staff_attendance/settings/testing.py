import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "staff_attendance_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

MESSAGE_TIMEOUT_MS = 3000

AUTO_INIT_DB = False

MAX_SESSIONS = 1000
