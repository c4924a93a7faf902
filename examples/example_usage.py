"""Example: use the service layer without Flask.

Computes the overtime breakdown of employee 1 for one night and prints the
payload the HTTP layer would return.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.overtime_system.overtime_system.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        holidays_path=settings.HOLIDAYS_FILE,
        local_timezone=settings.LOCAL_TIMEZONE,
        counter=settings.OVERTIME_COUNTER,
    )
    print(
        container.overtime_service.calculate(
            employee_id=1,
            hora_inicio="2025-10-14T19:00:00",
            hora_fin="2025-10-15T05:00:00",
        )
    )


if __name__ == "__main__":
    main()
