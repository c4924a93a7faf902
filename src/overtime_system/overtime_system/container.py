from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo

from .calendars.loader import load_holiday_calendar
from .calendars.model import HolidayCalendar
from .core.constants import DEFAULT_LOCAL_TIMEZONE
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .overtime.calculator import OvertimeCalculator
from .overtime.counters.factory import build_counter
from .overtime.mysql_overtime_repository import MySQLOvertimeRecordRepository
from .overtime.service import OvertimeService
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.service import ScheduleService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .users.mysql_user_repository import MySQLUserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    shifts_repo: MySQLShiftRepository
    schedules_repo: MySQLScheduleRepository
    employees_repo: MySQLEmployeeRepository
    users_repo: MySQLUserRepository
    overtime_repo: MySQLOvertimeRecordRepository

    holidays: HolidayCalendar
    schedule_service: ScheduleService
    overtime_calculator: OvertimeCalculator
    overtime_service: OvertimeService


def build_container(
    *,
    db_config: dict,
    holidays_path: str | Path | None = None,
    local_timezone: str = DEFAULT_LOCAL_TIMEZONE,
    counter: str | None = None,
    max_interval_days: int | None = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    shifts_repo = MySQLShiftRepository(conn)
    schedules_repo = MySQLScheduleRepository(conn)
    employees_repo = MySQLEmployeeRepository(conn)
    users_repo = MySQLUserRepository(conn)
    overtime_repo = MySQLOvertimeRecordRepository(conn)

    if holidays_path:
        holidays = load_holiday_calendar(holidays_path)
    else:
        logger.warning("No holiday file configured; holidays will be counted as regular days")
        holidays = HolidayCalendar()
    schedule_service = ScheduleService(schedules_repo, shifts_repo)
    overtime_calculator = OvertimeCalculator(
        schedule_service,
        holidays,
        counter=build_counter(counter),
        local_tz=ZoneInfo(local_timezone),
        max_interval_days=max_interval_days,
    )
    overtime_service = OvertimeService(overtime_calculator, overtime_repo, employees_repo, users_repo)

    return Container(
        conn=conn,
        shifts_repo=shifts_repo,
        schedules_repo=schedules_repo,
        employees_repo=employees_repo,
        users_repo=users_repo,
        overtime_repo=overtime_repo,
        holidays=holidays,
        schedule_service=schedule_service,
        overtime_calculator=overtime_calculator,
        overtime_service=overtime_service,
    )
