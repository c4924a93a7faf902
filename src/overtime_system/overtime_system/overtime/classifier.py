"""Per-minute decision: regular time, or which overtime bucket.

Precedence is Sunday/holiday, then night, then day. A Sunday night minute is
a Sunday minute; the buckets never add up premiums.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..calendars.model import HolidayCalendar
from ..calendars.rules import is_night_hour, is_sunday_or_holiday
from ..core.enums import OvertimeCategory
from ..schedules.model import ScheduleWindow


def is_in_schedule(moment: datetime, windows: Sequence[ScheduleWindow]) -> bool:
    t = moment.time()
    return any(w.contains(t) for w in windows)


def category_for(day: date, hour: int, holidays: HolidayCalendar) -> OvertimeCategory:
    if is_sunday_or_holiday(day, holidays):
        return OvertimeCategory.DOMINICAL
    if is_night_hour(hour):
        return OvertimeCategory.NOCTURNA
    return OvertimeCategory.DIURNA


def classify_minute(
    moment: datetime,
    windows: Sequence[ScheduleWindow],
    holidays: HolidayCalendar,
) -> Optional[OvertimeCategory]:
    """Return None when ``moment`` is inside a window, else its bucket."""
    if is_in_schedule(moment, windows):
        return None
    return category_for(moment.date(), moment.hour, holidays)
