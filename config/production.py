import os

from .config import Config, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = Config.db_config()

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL

LOCAL_TIMEZONE = Config.LOCAL_TIMEZONE
HOLIDAYS_FILE = Config.HOLIDAYS_FILE
OVERTIME_COUNTER = os.getenv("OVERTIME_COUNTER", "interval")
MAX_INTERVAL_DAYS = Config.MAX_INTERVAL_DAYS

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
