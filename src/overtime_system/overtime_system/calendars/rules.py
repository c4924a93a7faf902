from __future__ import annotations

from datetime import date, datetime, time, timedelta, tzinfo
from typing import List, Optional

from ..core.constants import NIGHT_END_HOUR, NIGHT_START_HOUR
from ..core.enums import Weekday
from .model import DaySegment, HolidayCalendar


def to_local_naive(moment: datetime, tz: Optional[tzinfo] = None) -> datetime:
    """Return ``moment`` as a naive local datetime.

    Naive values are taken to be local already. Aware values are converted to
    ``tz`` (or the machine's local zone when ``tz`` is None) and stripped.
    """
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(tz).replace(tzinfo=None)


def floor_to_minute(moment: datetime) -> datetime:
    return moment.replace(second=0, microsecond=0)


def ceil_to_minute(moment: datetime) -> datetime:
    floored = floor_to_minute(moment)
    return floored if floored == moment else floored + timedelta(minutes=1)


def weekday_of(moment: datetime | date) -> Weekday:
    """Weekday of the local calendar date of ``moment``."""
    return Weekday.from_index(moment.weekday())


def is_holiday(moment: datetime | date, calendar: HolidayCalendar) -> bool:
    if isinstance(moment, datetime):
        moment = moment.date()
    return moment in calendar


def is_night_hour(hour: int) -> bool:
    return hour >= NIGHT_START_HOUR or hour < NIGHT_END_HOUR


def is_sunday_or_holiday(day: date, calendar: HolidayCalendar) -> bool:
    return weekday_of(day) == Weekday.DOMINGO or is_holiday(day, calendar)


def split_at_midnight(start: datetime, end: datetime) -> List[DaySegment]:
    """Split ``[start, end)`` into day-aligned segments.

    Every segment ends where the next one starts, so the last minute before
    midnight belongs to the earlier day and midnight itself to the later one.
    """
    segments: List[DaySegment] = []
    cursor = start
    while cursor < end:
        next_midnight = datetime.combine(cursor.date() + timedelta(days=1), time(0, 0))
        segment_end = min(next_midnight, end)
        segments.append(DaySegment(day=cursor.date(), start=cursor, end=segment_end))
        cursor = segment_end
    return segments
