from __future__ import annotations

from datetime import date, datetime, time

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Fecha inválida (YYYY-MM-DD): {value!r}")


def parse_iso_datetime(value: str, field_name: str = "fecha") -> datetime:
    """Parse an ISO-8601 timestamp.

    A trailing ``Z`` is accepted as UTC, so values produced by JavaScript's
    ``toISOString()`` parse as aware datetimes.
    """
    if isinstance(value, datetime):
        return value
    v = str(value or "").strip()
    if not v:
        raise ValidationError(f"{field_name} es obligatorio")
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(v)
    except ValueError:
        raise ValidationError(f"{field_name} no tiene formato ISO-8601: {value!r}")


def parse_hhmm(value: str, field_name: str = "hora") -> time:
    """Parse HH:MM (or HH:MM:SS) into a time of day."""
    if isinstance(value, time):
        return value
    v = str(value or "").strip()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(v, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"{field_name} inválida (HH:MM): {value!r}")

