import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "paystream_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False

ATTENDANCE_LATE_CUTOFF = "09:00:00"
ATTENDANCE_DEVICE_SOURCE = "DS-K1T320MFWX"
CURRENCY_PREFIX = "Rs."
PAYROLL_COMMIT_STATUS = "Processed"
