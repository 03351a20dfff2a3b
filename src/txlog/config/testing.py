import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "transaction_log_test"),
}
DB_POOL_SIZE = 2
DB_POOL_TIMEOUT = 1.0

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SESSION_HOURS = 1

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
