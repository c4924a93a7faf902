import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]


def env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes"}


def env_int(name: str, default: str = "") -> int | None:
    value = os.getenv(name, default).strip()
    return int(value) if value else None


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "cambiar-esta-clave")

    DB_HOST = os.getenv("DB_HOST", "localhost")
    DB_PORT = int(os.getenv("DB_PORT", "3306"))
    DB_USER = os.getenv("DB_USER", "root")
    DB_PASSWORD = os.getenv("DB_PASSWORD", "")
    DB_NAME = os.getenv("DB_NAME", "overtime_db")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Overtime engine
    LOCAL_TIMEZONE = os.getenv("LOCAL_TIMEZONE", "America/Bogota")
    HOLIDAYS_FILE = os.getenv("HOLIDAYS_FILE", str(BASE_DIR / "data" / "holidays.json"))
    OVERTIME_COUNTER = os.getenv("OVERTIME_COUNTER", "minute")
    MAX_INTERVAL_DAYS = env_int("MAX_INTERVAL_DAYS", "7")

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
        }
