from __future__ import annotations

from datetime import datetime, time
from typing import List, Sequence, Tuple

from ...calendars.model import DaySegment, HolidayCalendar
from ...calendars.rules import is_sunday_or_holiday
from ...core.constants import MINUTES_PER_HOUR, NIGHT_END_HOUR, NIGHT_START_HOUR
from ...schedules.model import ScheduleWindow
from ..model import MinuteTally
from .base import MinuteCounter

_MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR
_MICROS_PER_MINUTE = 60 * 1_000_000

_NIGHT_RANGES = (
    (0, NIGHT_END_HOUR * MINUTES_PER_HOUR),
    (NIGHT_START_HOUR * MINUTES_PER_HOUR, _MINUTES_PER_DAY),
)


def _minute_of_day(moment: datetime) -> int:
    return moment.hour * MINUTES_PER_HOUR + moment.minute


def _first_minute_at_or_after(t: time) -> int:
    # A window bound with seconds covers a minute instant only from the next whole minute.
    micros = ((t.hour * MINUTES_PER_HOUR + t.minute) * 60 + t.second) * 1_000_000 + t.microsecond
    return -(-micros // _MICROS_PER_MINUTE)


def _overlap(a: int, b: int, lo: int, hi: int) -> int:
    return max(0, min(b, hi) - max(a, lo))


def _gaps(start: int, end: int, windows: Sequence[ScheduleWindow]) -> List[Tuple[int, int]]:
    """Parts of ``[start, end)`` (minutes of day) not covered by any window."""
    spans = sorted(
        (_first_minute_at_or_after(w.start), _first_minute_at_or_after(w.end)) for w in windows
    )
    gaps: List[Tuple[int, int]] = []
    cursor = start
    for ws, we in spans:
        if we <= cursor or ws >= end:
            continue
        if ws > cursor:
            gaps.append((cursor, ws))
        cursor = max(cursor, we)
        if cursor >= end:
            break
    if cursor < end:
        gaps.append((cursor, end))
    return gaps


class IntervalArithmeticCounter(MinuteCounter):
    """Subtract the windows from the segment and classify the gaps in bulk.

    Same results as walking minute by minute, in time proportional to the
    number of windows instead of the interval length.
    """

    name = "interval"

    def count(
        self,
        segment: DaySegment,
        windows: Sequence[ScheduleWindow],
        holidays: HolidayCalendar,
    ) -> MinuteTally:
        start = _minute_of_day(segment.start)
        end = start + segment.minutes
        gaps = _gaps(start, end, windows)

        if is_sunday_or_holiday(segment.day, holidays):
            return MinuteTally(sunday_or_holiday=sum(b - a for a, b in gaps))

        night = 0
        day = 0
        for a, b in gaps:
            in_night = sum(_overlap(a, b, lo, hi) for lo, hi in _NIGHT_RANGES)
            night += in_night
            day += (b - a) - in_night
        return MinuteTally(day=day, night=night)
