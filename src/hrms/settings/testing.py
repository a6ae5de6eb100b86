SECRET_KEY = "test-secret"

HOST = "127.0.0.1"
PORT = 3000

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORAGE_BACKEND = "memory"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "hrms_test",
}

AUTO_INIT_DB = False
SEED_DEMO_DATA = False

STATIC_DIR = None
CORS_ORIGINS = "*"

WORKDAY_START = "09:00"
WORKDAY_END = "18:00"
LATE_GRACE_MINUTES = 5
WORKING_DAYS_PER_MONTH = 22
