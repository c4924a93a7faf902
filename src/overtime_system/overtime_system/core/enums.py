from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles that may submit overtime records."""

    ADMIN = "ADMIN"
    COORDINADOR = "COORDINADOR"


class Weekday(str, Enum):
    """Canonical weekday labels, Monday first (same order as date.weekday())."""

    LUNES = "LUNES"
    MARTES = "MARTES"
    MIERCOLES = "MIERCOLES"
    JUEVES = "JUEVES"
    VIERNES = "VIERNES"
    SABADO = "SABADO"
    DOMINGO = "DOMINGO"

    @classmethod
    def from_index(cls, index: int) -> "Weekday":
        return _WEEKDAY_ORDER[index]


_WEEKDAY_ORDER = list(Weekday)


class OvertimeCategory(str, Enum):
    """Mutually exclusive overtime buckets."""

    DIURNA = "DIURNA"
    NOCTURNA = "NOCTURNA"
    DOMINICAL = "DOMINICAL"


class OvertimeStatus(str, Enum):
    """Approval state stored with a record. Only PENDIENTE is set here."""

    PENDIENTE = "PENDIENTE"
    APROBADO = "APROBADO"
    RECHAZADO = "RECHAZADO"
