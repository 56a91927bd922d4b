import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "clinic_timepay_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

GRACE_PERIOD_END = "08:15:00"
STANDARD_SHIFT_HOURS = 8
OVERNIGHT_POLICY = "reject"

BASE_START_HOUR = 8
STAGGER_HOURS = 2
CUTOFF_HOUR = 20

HEALTH_INSURANCE_RATE = "0.05"
