import logging

import config.testing
from src.overtime_system.overtime_system import main
from src.overtime_system.overtime_system.container import build_container
from src.overtime_system.overtime_system.core.constants import DEFAULT_LOCAL_TIMEZONE

DB = {"host": "localhost", "port": 3306, "user": "root", "password": "", "database": "overtime_test"}


def test_missing_holiday_file_is_logged(caplog):
    with caplog.at_level(logging.WARNING):
        container = build_container(db_config=DB, holidays_path="")

    assert len(container.holidays) == 0
    assert any("No holiday file configured" in r.getMessage() for r in caplog.records)


def test_holiday_file_is_loaded(tmp_path, caplog):
    path = tmp_path / "holidays.json"
    path.write_text('{"version": "t-1", "dates": ["2025-12-25"]}', encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        container = build_container(db_config=DB, holidays_path=path)

    assert container.holidays.version == "t-1"
    assert container.overtime_calculator.holidays is container.holidays
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_app_falls_back_to_default_timezone(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.delattr(config.testing, "LOCAL_TIMEZONE")
    seen = {}

    def fake_build_container(**kwargs):
        seen.update(kwargs)
        return build_container(**kwargs)

    monkeypatch.setattr(main, "build_container", fake_build_container)
    main.create_app()

    assert seen["local_timezone"] == DEFAULT_LOCAL_TIMEZONE
