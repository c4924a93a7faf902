from __future__ import annotations

from datetime import time
from typing import Dict, List, Optional, Sequence

from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_positive_id
from ..core.enums import Role, Weekday
from ..core.exceptions import AuthorizationError, NotFoundError, UnresolvableScheduleError, ValidationError
from ..shifts.repository import ShiftRepository
from .model import ScheduleWindow, ShiftSchedule
from .repository import ScheduleRepository, WindowSource


def parse_weekday(value) -> Weekday:
    if isinstance(value, Weekday):
        return value
    try:
        return Weekday(str(value or "").strip().upper())
    except ValueError:
        raise ValidationError(f"El día debe ser uno de: {', '.join(w.value for w in Weekday)}")


class ScheduleService(WindowSource):
    """Reads and maintains the weekly working windows of each shift."""

    def __init__(self, schedules: ScheduleRepository, shifts: ShiftRepository):
        self._schedules = schedules
        self._shifts = shifts

    def windows_for(self, shift_id: int, weekday: Weekday) -> List[ScheduleWindow]:
        """Active windows of ``shift_id`` on ``weekday``, earliest first.

        An empty list means nothing is scheduled that day. An unknown shift is
        an error, not an empty day.
        """
        if self._shifts.get_by_id(int(shift_id)) is None:
            raise UnresolvableScheduleError(f"Turno con ID {shift_id} no encontrado")

        rows = self._schedules.list_for_shift_and_weekday(shift_id=int(shift_id), weekday=weekday)
        windows = [w for row in rows if row.active for w in row.working_windows()]
        return sorted(windows, key=lambda w: w.start)

    def create_schedule(
        self,
        *,
        current_role: Role,
        shift_id: int,
        weekday,
        window_start,
        window_end,
        break_start=None,
        break_end=None,
    ) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("No tiene permisos para modificar horarios")

        shift_id = require_positive_id(shift_id, "Turno")
        if self._shifts.get_by_id(shift_id) is None:
            raise NotFoundError(f"Turno con ID {shift_id} no encontrado")

        day = parse_weekday(weekday)
        start = parse_hhmm(window_start, "Hora de inicio")
        end = parse_hhmm(window_end, "Hora de fin")
        if start >= end:
            raise ValidationError("La hora de fin debe ser posterior a la hora de inicio")

        b_start: Optional[time] = None
        b_end: Optional[time] = None
        if break_start or break_end:
            if not (break_start and break_end):
                raise ValidationError("El descanso requiere hora de inicio y de fin")
            b_start = parse_hhmm(break_start, "Inicio de descanso")
            b_end = parse_hhmm(break_end, "Fin de descanso")
            if b_start >= b_end:
                raise ValidationError("La hora fin del descanso debe ser posterior a la hora inicio")
            if b_start <= start or b_end >= end:
                raise ValidationError("El descanso debe estar dentro del horario de trabajo")

        candidate = ShiftSchedule(
            schedule_id=0,
            shift_id=shift_id,
            weekday=day,
            window_start=start,
            window_end=end,
            break_start=b_start,
            break_end=b_end,
        )
        existing = self._schedules.list_for_shift_and_weekday(shift_id=shift_id, weekday=day)
        self._ensure_no_overlap(candidate.working_windows(), existing)

        return self._schedules.create(
            shift_id=shift_id,
            weekday=day,
            window_start=start,
            window_end=end,
            break_start=b_start,
            break_end=b_end,
        )

    def deactivate(self, *, current_role: Role, schedule_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("No tiene permisos para modificar horarios")

        schedule_id = require_positive_id(schedule_id, "Horario")
        if self._schedules.get_by_id(schedule_id) is None:
            raise NotFoundError(f"Horario con ID {schedule_id} no encontrado")
        if not self._schedules.set_active(schedule_id=schedule_id, active=False):
            raise ValidationError("No se pudo desactivar el horario")

    @staticmethod
    def _ensure_no_overlap(new_windows: Sequence[ScheduleWindow], existing: Sequence[ShiftSchedule]) -> None:
        for row in existing:
            if not row.active:
                continue
            for current in row.working_windows():
                for w in new_windows:
                    if w.overlaps(current):
                        raise ValidationError(
                            f"El horario {w.start:%H:%M}-{w.end:%H:%M} se cruza con "
                            f"{current.start:%H:%M}-{current.end:%H:%M} del día {row.weekday.value}"
                        )


class WeeklyWindowCache:
    """Memoises ``windows_for`` by weekday for a single computation.

    Create one per call; it is not shared between requests.
    """

    def __init__(self, source: WindowSource, shift_id: int):
        self._source = source
        self._shift_id = shift_id
        self._by_weekday: Dict[Weekday, Sequence[ScheduleWindow]] = {}

    def get(self, weekday: Weekday) -> Sequence[ScheduleWindow]:
        if weekday not in self._by_weekday:
            self._by_weekday[weekday] = tuple(self._source.windows_for(self._shift_id, weekday))
        return self._by_weekday[weekday]
