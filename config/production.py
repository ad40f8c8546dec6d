import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_ledger"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

SUMMARY_MAX_WORKERS = int(os.getenv("SUMMARY_MAX_WORKERS", "6"))
RECENT_CHECKINS_LIMIT = int(os.getenv("RECENT_CHECKINS_LIMIT", "5"))

DEFAULT_PLACE_NAME = os.getenv("DEFAULT_PLACE_NAME", "My Company")
DEFAULT_MANAGER_NAME = os.getenv("DEFAULT_MANAGER_NAME", "Manager")
