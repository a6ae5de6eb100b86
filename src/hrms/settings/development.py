import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# "memory" keeps everything in-process; "mysql" uses DB_CONFIG.
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hrms_db"),
}

# If enabled (mysql backend), schema.sql is applied on startup (CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

STATIC_DIR = os.getenv("STATIC_DIR") or None
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

WORKDAY_START = os.getenv("WORKDAY_START", "09:00")
WORKDAY_END = os.getenv("WORKDAY_END", "18:00")
LATE_GRACE_MINUTES = int(os.getenv("LATE_GRACE_MINUTES", "5"))
WORKING_DAYS_PER_MONTH = int(os.getenv("WORKING_DAYS_PER_MONTH", "22"))
