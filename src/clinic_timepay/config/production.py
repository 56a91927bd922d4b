import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "clinic_timepay"),
}

DEBUG = False

# Apply database/schema.sql on startup (idempotent: CREATE TABLE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

GRACE_PERIOD_END = os.getenv("GRACE_PERIOD_END", "08:15:00")
STANDARD_SHIFT_HOURS = int(os.getenv("STANDARD_SHIFT_HOURS", "8"))
OVERNIGHT_POLICY = os.getenv("OVERNIGHT_POLICY", "reject")

BASE_START_HOUR = int(os.getenv("BASE_START_HOUR", "8"))
STAGGER_HOURS = int(os.getenv("STAGGER_HOURS", "2"))
CUTOFF_HOUR = int(os.getenv("CUTOFF_HOUR", "20"))

HEALTH_INSURANCE_RATE = os.getenv("HEALTH_INSURANCE_RATE", "0.05")
