from __future__ import annotations

from datetime import time
from typing import Any, Dict, Optional, Sequence

from ..core.enums import Weekday
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import ShiftSchedule
from .repository import ScheduleRepository

_COLUMNS = "schedule_id, shift_id, weekday, window_start, window_end, break_start, break_end, active"


def _to_schedule(r: Dict[str, Any]) -> ShiftSchedule:
    return ShiftSchedule(
        schedule_id=int(r["schedule_id"]),
        shift_id=int(r["shift_id"]),
        weekday=Weekday(r["weekday"]),
        window_start=normalize_mysql_time(r["window_start"]),
        window_end=normalize_mysql_time(r["window_end"]),
        break_start=normalize_mysql_time(r.get("break_start")),
        break_end=normalize_mysql_time(r.get("break_end")),
        active=bool(r.get("active", True)),
    )


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_shift_and_weekday(
        self,
        *,
        shift_id: int,
        weekday: Weekday,
        include_inactive: bool = False,
    ) -> Sequence[ShiftSchedule]:
        clauses = ["shift_id=%s", "weekday=%s"]
        params: list[object] = [int(shift_id), weekday.value]
        if not include_inactive:
            clauses.append("active=1")

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM shift_schedules
                WHERE {where}
                ORDER BY window_start ASC
                """,
                tuple(params),
            )
            return [_to_schedule(r) for r in fetchall(cur)]

    def get_by_id(self, schedule_id: int) -> Optional[ShiftSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM shift_schedules WHERE schedule_id=%s",
                (int(schedule_id),),
            )
            r = fetchone(cur)
            return _to_schedule(r) if r else None

    def create(
        self,
        *,
        shift_id: int,
        weekday: Weekday,
        window_start: time,
        window_end: time,
        break_start: Optional[time] = None,
        break_end: Optional[time] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shift_schedules(shift_id, weekday, window_start, window_end, break_start, break_end, active)
                VALUES(%s,%s,%s,%s,%s,%s,1)
                """,
                (int(shift_id), weekday.value, window_start, window_end, break_start, break_end),
            )
            return int(cur.lastrowid)

    def set_active(self, *, schedule_id: int, active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE shift_schedules SET active=%s WHERE schedule_id=%s",
                (1 if active else 0, int(schedule_id)),
            )
            return cur.rowcount > 0
