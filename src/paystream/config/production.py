import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "paystream"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "paystream"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

ATTENDANCE_LATE_CUTOFF = os.getenv("ATTENDANCE_LATE_CUTOFF", "09:00:00")
ATTENDANCE_DEVICE_SOURCE = os.getenv("ATTENDANCE_DEVICE_SOURCE", "DS-K1T320MFWX")
CURRENCY_PREFIX = os.getenv("CURRENCY_PREFIX", "Rs.")
PAYROLL_COMMIT_STATUS = os.getenv("PAYROLL_COMMIT_STATUS", "Processed")
