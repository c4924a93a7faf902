from .config import Config

SECRET_KEY = "test-secret"
DB_CONFIG = Config.db_config()

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

LOCAL_TIMEZONE = "America/Bogota"
HOLIDAYS_FILE = Config.HOLIDAYS_FILE
OVERTIME_COUNTER = "minute"
MAX_INTERVAL_DAYS = 7

AUTO_INIT_DB = False
