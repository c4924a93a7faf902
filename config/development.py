from .config import Config, env_flag

SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = Config.db_config()

DEBUG = True
LOG_LEVEL = "DEBUG"

LOCAL_TIMEZONE = Config.LOCAL_TIMEZONE
HOLIDAYS_FILE = Config.HOLIDAYS_FILE
OVERTIME_COUNTER = Config.OVERTIME_COUNTER
MAX_INTERVAL_DAYS = Config.MAX_INTERVAL_DAYS

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
