import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hrms_db"),
}

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

STATIC_DIR = os.getenv("STATIC_DIR") or None
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

WORKDAY_START = os.getenv("WORKDAY_START", "09:00")
WORKDAY_END = os.getenv("WORKDAY_END", "18:00")
LATE_GRACE_MINUTES = int(os.getenv("LATE_GRACE_MINUTES", "5"))
WORKING_DAYS_PER_MONTH = int(os.getenv("WORKING_DAYS_PER_MONTH", "22"))
