from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from ..common.datetime_utils import parse_iso_datetime
from ..common.validators import require_positive_id
from ..core.constants import DEFAULT_RECORD_LIST_LIMIT
from ..core.enums import OvertimeStatus
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..users.model import User
from ..users.repository import UserRepository
from .calculator import OvertimeCalculator
from .model import OvertimeBreakdown, OvertimeRecord
from .repository import OvertimeRecordRepository

logger = logging.getLogger(__name__)


def _clean(value) -> Optional[str]:
    if value is None:
        return None
    return str(value).strip() or None


def parse_status(value) -> OvertimeStatus:
    if isinstance(value, OvertimeStatus):
        return value
    try:
        return OvertimeStatus(str(value or "").strip().upper())
    except ValueError:
        raise ValidationError(f"Estado inválido. Use uno de: {', '.join(s.value for s in OvertimeStatus)}")


class OvertimeService:
    """Overtime (horas extra) use cases on top of the calculator."""

    def __init__(
        self,
        calculator: OvertimeCalculator,
        records: OvertimeRecordRepository,
        employees: EmployeeRepository,
        users: UserRepository,
    ):
        self._calculator = calculator
        self._records = records
        self._employees = employees
        self._users = users

    def _get_employee(self, employee_id, *, active_only: bool = True) -> Employee:
        employee_id = require_positive_id(employee_id, "Empleado")
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Empleado no encontrado")
        if active_only and not employee.is_active:
            raise ValidationError("El empleado está inactivo")
        return employee

    def _get_active_user(self, user_id, field_name: str) -> User:
        user_id = require_positive_id(user_id, field_name)
        user = self._users.get_by_id(user_id)
        if not user or not user.is_active:
            raise NotFoundError(f"{field_name} no encontrado")
        return user

    @staticmethod
    def _resolve_shift(employee: Employee, shift_id) -> int:
        if shift_id not in (None, ""):
            return require_positive_id(shift_id, "Turno")
        if not employee.shift_id:
            raise ValidationError("El empleado no tiene un turno asignado")
        return int(employee.shift_id)

    @staticmethod
    def _parse_interval(hora_inicio, hora_fin) -> Tuple[datetime, datetime]:
        return (
            parse_iso_datetime(hora_inicio, "horaInicio"),
            parse_iso_datetime(hora_fin, "horaFin"),
        )

    def breakdown(self, *, employee_id, hora_inicio, hora_fin, shift_id=None) -> OvertimeBreakdown:
        employee = self._get_employee(employee_id)
        start, end = self._parse_interval(hora_inicio, hora_fin)
        return self._calculator.compute_overtime(start, end, self._resolve_shift(employee, shift_id))

    def calculate(self, *, employee_id, hora_inicio, hora_fin, shift_id=None) -> dict:
        """Payload shape: totalHorasExtra, diurnas, nocturnas, dominicales."""
        return self.breakdown(
            employee_id=employee_id,
            hora_inicio=hora_inicio,
            hora_fin=hora_fin,
            shift_id=shift_id,
        ).to_payload()

    def create_record(
        self,
        *,
        coordinator_id,
        employee_id,
        hora_inicio,
        hora_fin,
        shift_id=None,
        observaciones: Optional[str] = None,
        nro_solicitud: Optional[str] = None,
    ) -> int:
        coordinator = self._get_active_user(coordinator_id, "Coordinador")

        employee = self._get_employee(employee_id)
        if not coordinator.can_manage_area(employee.area_id):
            raise AuthorizationError("El coordinador no tiene acceso a este empleado")

        start, end = self._parse_interval(hora_inicio, hora_fin)
        shift = self._resolve_shift(employee, shift_id)
        breakdown = self._calculator.compute_overtime(start, end, shift)

        record_id = self._records.create(
            employee_id=employee.employee_id,
            coordinator_id=coordinator.user_id,
            shift_id=shift,
            start=self._calculator.localize(start),
            end=self._calculator.localize(end),
            breakdown=breakdown,
            observaciones=_clean(observaciones),
            nro_solicitud=_clean(nro_solicitud),
            holiday_calendar_version=self._calculator.holidays.version,
        )
        logger.info(
            "Overtime record %s created for employee %s by user %s (%.2f h)",
            record_id,
            employee.employee_id,
            coordinator.user_id,
            breakdown.total_hours,
        )
        return record_id

    def get_record(self, record_id) -> OvertimeRecord:
        record_id = require_positive_id(record_id, "Registro de horas extra")
        record = self._records.get_by_id(record_id)
        if not record:
            raise NotFoundError("Registro de horas extra no encontrado")
        return record

    def list_for_employee(self, employee_id, *, limit: int = DEFAULT_RECORD_LIST_LIMIT) -> List[OvertimeRecord]:
        employee = self._get_employee(employee_id, active_only=False)
        return list(self._records.list_for_employee(employee.employee_id, limit=limit))

    def list_for_coordinator(self, coordinator_id, *, limit: int = DEFAULT_RECORD_LIST_LIMIT) -> List[OvertimeRecord]:
        coordinator_id = require_positive_id(coordinator_id, "Coordinador")
        return list(self._records.list_for_coordinator(coordinator_id, limit=limit))

    def list_by_status(self, status, *, limit: int = DEFAULT_RECORD_LIST_LIMIT) -> List[OvertimeRecord]:
        return list(self._records.list_by_status(parse_status(status), limit=limit))

    def list_all(self, *, current_user_id, limit: int = DEFAULT_RECORD_LIST_LIMIT) -> List[OvertimeRecord]:
        """Every record, newest first. Administrators only."""
        user = self._get_active_user(current_user_id, "Usuario")
        if not user.is_admin():
            raise AuthorizationError("Solo un administrador puede ver todos los registros")
        return list(self._records.list_all(limit=limit))
