from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from ..core.enums import OvertimeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import OvertimeBreakdown, OvertimeRecord
from .repository import OvertimeRecordRepository

_COLUMNS = """
    record_id, employee_id, coordinator_id, shift_id, start_at, end_at,
    day_hours, night_hours, sunday_holiday_hours, total_hours,
    status, observaciones, nro_solicitud, holiday_calendar_version, created_at
"""


def _to_record(r: Dict[str, Any]) -> OvertimeRecord:
    return OvertimeRecord(
        record_id=int(r["record_id"]),
        employee_id=int(r["employee_id"]),
        coordinator_id=int(r["coordinator_id"]),
        shift_id=int(r["shift_id"]),
        start=r["start_at"],
        end=r["end_at"],
        day_hours=float(r["day_hours"]),
        night_hours=float(r["night_hours"]),
        sunday_or_holiday_hours=float(r["sunday_holiday_hours"]),
        total_hours=float(r["total_hours"]),
        status=OvertimeStatus(r["status"]),
        observaciones=r.get("observaciones"),
        nro_solicitud=r.get("nro_solicitud"),
        holiday_calendar_version=r.get("holiday_calendar_version"),
        created_at=r.get("created_at"),
    )


class MySQLOvertimeRecordRepository(OvertimeRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        employee_id: int,
        coordinator_id: int,
        shift_id: int,
        start: datetime,
        end: datetime,
        breakdown: OvertimeBreakdown,
        observaciones: Optional[str] = None,
        nro_solicitud: Optional[str] = None,
        holiday_calendar_version: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO overtime_records(
                    employee_id, coordinator_id, shift_id, start_at, end_at,
                    day_hours, night_hours, sunday_holiday_hours, total_hours,
                    status, observaciones, nro_solicitud, holiday_calendar_version
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(employee_id),
                    int(coordinator_id),
                    int(shift_id),
                    start,
                    end,
                    breakdown.day_hours,
                    breakdown.night_hours,
                    breakdown.sunday_or_holiday_hours,
                    breakdown.total_hours,
                    OvertimeStatus.PENDIENTE.value,
                    observaciones,
                    nro_solicitud,
                    holiday_calendar_version,
                ),
            )
            return int(cur.lastrowid)

    def get_by_id(self, record_id: int) -> Optional[OvertimeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM overtime_records WHERE record_id=%s", (int(record_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def _list_where(self, where: str, params: tuple, limit: int) -> Sequence[OvertimeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM overtime_records
                {where}
                ORDER BY start_at DESC
                LIMIT %s
                """,
                params + (int(limit),),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_employee(self, employee_id: int, *, limit: int = 200) -> Sequence[OvertimeRecord]:
        return self._list_where("WHERE employee_id=%s", (int(employee_id),), limit)

    def list_for_coordinator(self, coordinator_id: int, *, limit: int = 200) -> Sequence[OvertimeRecord]:
        return self._list_where("WHERE coordinator_id=%s", (int(coordinator_id),), limit)

    def list_by_status(self, status: OvertimeStatus, *, limit: int = 200) -> Sequence[OvertimeRecord]:
        return self._list_where("WHERE status=%s", (status.value,), limit)

    def list_all(self, *, limit: int = 200) -> Sequence[OvertimeRecord]:
        return self._list_where("", (), limit)
