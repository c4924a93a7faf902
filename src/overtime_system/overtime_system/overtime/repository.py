from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import OvertimeStatus
from .model import OvertimeBreakdown, OvertimeRecord


class OvertimeRecordRepository(Protocol):
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
        """Store a new record with status PENDIENTE.

        Returns record_id.
        """

        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[OvertimeRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int, *, limit: int = 200) -> Sequence[OvertimeRecord]:
        raise NotImplementedError

    def list_for_coordinator(self, coordinator_id: int, *, limit: int = 200) -> Sequence[OvertimeRecord]:
        raise NotImplementedError

    def list_by_status(self, status: OvertimeStatus, *, limit: int = 200) -> Sequence[OvertimeRecord]:
        raise NotImplementedError

    def list_all(self, *, limit: int = 200) -> Sequence[OvertimeRecord]:
        raise NotImplementedError
