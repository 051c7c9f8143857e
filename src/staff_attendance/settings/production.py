import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "staff_attendance"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

MESSAGE_TIMEOUT_MS = int(os.getenv("MESSAGE_TIMEOUT_MS", "3000"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

# Per-browser attendance stores kept in memory; least recently used are dropped past this
MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "1000"))
