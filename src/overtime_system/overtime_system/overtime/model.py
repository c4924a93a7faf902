from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, Optional

from ..core.constants import HOURS_DECIMALS, MINUTES_PER_HOUR
from ..core.enums import OvertimeCategory, OvertimeStatus


def minutes_to_hours(minutes: int) -> float:
    """Convert whole minutes to hours rounded to two decimals (125 -> 2.08)."""
    return round(minutes / MINUTES_PER_HOUR, HOURS_DECIMALS)


@dataclass(frozen=True)
class MinuteTally:
    """Integer minute accumulator per overtime bucket."""

    day: int = 0
    night: int = 0
    sunday_or_holiday: int = 0

    @classmethod
    def from_counts(cls, counts: Mapping[OvertimeCategory, int]) -> "MinuteTally":
        return cls(
            day=int(counts.get(OvertimeCategory.DIURNA, 0)),
            night=int(counts.get(OvertimeCategory.NOCTURNA, 0)),
            sunday_or_holiday=int(counts.get(OvertimeCategory.DOMINICAL, 0)),
        )

    @property
    def total(self) -> int:
        return self.day + self.night + self.sunday_or_holiday

    def __add__(self, other: "MinuteTally") -> "MinuteTally":
        return MinuteTally(
            day=self.day + other.day,
            night=self.night + other.night,
            sunday_or_holiday=self.sunday_or_holiday + other.sunday_or_holiday,
        )


@dataclass(frozen=True)
class OvertimeBreakdown:
    """Extra minutes per bucket, with hour values derived only at the end."""

    day_minutes: int = 0
    night_minutes: int = 0
    sunday_or_holiday_minutes: int = 0

    @classmethod
    def from_tally(cls, tally: MinuteTally) -> "OvertimeBreakdown":
        return cls(
            day_minutes=tally.day,
            night_minutes=tally.night,
            sunday_or_holiday_minutes=tally.sunday_or_holiday,
        )

    @property
    def total_minutes(self) -> int:
        return self.day_minutes + self.night_minutes + self.sunday_or_holiday_minutes

    @property
    def day_hours(self) -> float:
        return minutes_to_hours(self.day_minutes)

    @property
    def night_hours(self) -> float:
        return minutes_to_hours(self.night_minutes)

    @property
    def sunday_or_holiday_hours(self) -> float:
        return minutes_to_hours(self.sunday_or_holiday_minutes)

    @property
    def total_hours(self) -> float:
        return minutes_to_hours(self.total_minutes)

    def to_payload(self) -> dict:
        return {
            "totalHorasExtra": self.total_hours,
            "diurnas": self.day_hours,
            "nocturnas": self.night_hours,
            "dominicales": self.sunday_or_holiday_hours,
        }


@dataclass(frozen=True)
class RegisteredInterval:
    """Raw clock-in / clock-out pair submitted for evaluation (registro)."""

    start: datetime
    end: datetime
    employee_id: int
    shift_id: int


@dataclass(frozen=True)
class OvertimeRecord:
    """Persisted overtime claim (hora extra) created by a coordinator."""

    record_id: int
    employee_id: int
    coordinator_id: int
    shift_id: int
    start: datetime
    end: datetime
    day_hours: float
    night_hours: float
    sunday_or_holiday_hours: float
    total_hours: float
    status: OvertimeStatus = OvertimeStatus.PENDIENTE
    observaciones: Optional[str] = None
    nro_solicitud: Optional[str] = None
    holiday_calendar_version: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_payload(self) -> dict:
        return {
            "id": self.record_id,
            "empleadoId": self.employee_id,
            "coordinadorId": self.coordinator_id,
            "turnoId": self.shift_id,
            "horaInicio": self.start.isoformat(),
            "horaFin": self.end.isoformat(),
            "diurnas": self.day_hours,
            "nocturnas": self.night_hours,
            "dominicales": self.sunday_or_holiday_hours,
            "totalHorasExtra": self.total_hours,
            "estado": self.status.value,
            "observaciones": self.observaciones,
            "nroSolicitud": self.nro_solicitud,
            "calendarioFestivos": self.holiday_calendar_version,
        }
