from __future__ import annotations

import json
import logging
from pathlib import Path

from ..core.exceptions import ValidationError
from .model import HolidayCalendar

logger = logging.getLogger(__name__)


def load_holiday_calendar(path: str | Path) -> HolidayCalendar:
    """Load a versioned holiday file.

    Expected shape::

        {"version": "co-2025.1", "dates": ["2025-01-01", "2025-05-01"]}
    """
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ValidationError(f"No existe el archivo de festivos: {path}")
    except json.JSONDecodeError as e:
        raise ValidationError(f"Archivo de festivos inválido ({path}): {e}")

    if not isinstance(payload, dict) or not isinstance(payload.get("dates"), list):
        raise ValidationError(f"Archivo de festivos inválido ({path}): falta la lista 'dates'")

    calendar = HolidayCalendar.from_iso(payload["dates"], version=str(payload.get("version") or path.stem))
    logger.info("Loaded holiday calendar %s (%d dates) from %s", calendar.version, len(calendar), path)
    return calendar
