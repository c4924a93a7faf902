from __future__ import annotations

from datetime import timedelta
from typing import Dict, Sequence

from ...calendars.model import DaySegment, HolidayCalendar
from ...core.enums import OvertimeCategory
from ...schedules.model import ScheduleWindow
from ..classifier import classify_minute
from ..model import MinuteTally
from .base import MinuteCounter

_ONE_MINUTE = timedelta(minutes=1)


class MinuteByMinuteCounter(MinuteCounter):
    """Classify every minute instant of the segment, one at a time."""

    name = "minute"

    def count(
        self,
        segment: DaySegment,
        windows: Sequence[ScheduleWindow],
        holidays: HolidayCalendar,
    ) -> MinuteTally:
        counts: Dict[OvertimeCategory, int] = {c: 0 for c in OvertimeCategory}
        moment = segment.start
        while moment < segment.end:
            category = classify_minute(moment, windows, holidays)
            if category is not None:
                counts[category] += 1
            moment += _ONE_MINUTE
        return MinuteTally.from_counts(counts)
