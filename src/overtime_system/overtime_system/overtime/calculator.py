from __future__ import annotations

import logging
from datetime import datetime, timedelta, tzinfo
from typing import Optional

from ..calendars.model import HolidayCalendar
from ..calendars.rules import ceil_to_minute, floor_to_minute, split_at_midnight, to_local_naive, weekday_of
from ..core.exceptions import InvalidIntervalError
from ..schedules.repository import WindowSource
from ..schedules.service import WeeklyWindowCache
from .counters.base import MinuteCounter
from .counters.minute_counter import MinuteByMinuteCounter
from .model import MinuteTally, OvertimeBreakdown, RegisteredInterval

logger = logging.getLogger(__name__)


class OvertimeCalculator:
    """Turns a registered interval into extra minutes per bucket.

    The interval is cut at every local midnight and each day segment is
    counted against that weekday's own windows and that date's holiday status.
    The calculator keeps no state between calls.
    """

    def __init__(
        self,
        schedules: WindowSource,
        holidays: HolidayCalendar,
        *,
        counter: Optional[MinuteCounter] = None,
        local_tz: Optional[tzinfo] = None,
        max_interval_days: Optional[int] = None,
    ):
        self._schedules = schedules
        self._holidays = holidays
        self._counter = counter or MinuteByMinuteCounter()
        self._local_tz = local_tz
        self._max_interval = timedelta(days=max_interval_days) if max_interval_days else None

    @property
    def holidays(self) -> HolidayCalendar:
        return self._holidays

    def localize(self, moment: datetime) -> datetime:
        """Naive local wall-clock time of ``moment``."""
        return to_local_naive(moment, self._local_tz)

    def compute_overtime(self, start: datetime, end: datetime, shift_id: int) -> OvertimeBreakdown:
        start = self.localize(start)
        end = self.localize(end)
        if start >= end:
            raise InvalidIntervalError("La hora de inicio debe ser anterior a la hora de fin")
        if self._max_interval is not None and end - start > self._max_interval:
            raise InvalidIntervalError(
                f"El intervalo supera el máximo permitido de {self._max_interval.days} días"
            )

        windows = WeeklyWindowCache(self._schedules, shift_id)
        tally = MinuteTally()
        # A started minute counts as a whole minute, attributed to its start instant.
        for segment in split_at_midnight(floor_to_minute(start), ceil_to_minute(end)):
            tally += self._counter.count(segment, windows.get(weekday_of(segment.day)), self._holidays)

        breakdown = OvertimeBreakdown.from_tally(tally)
        logger.debug(
            "Overtime for shift %s %s -> %s (%s): day=%d night=%d sunday/holiday=%d min",
            shift_id,
            start.isoformat(),
            end.isoformat(),
            self._counter.name,
            breakdown.day_minutes,
            breakdown.night_minutes,
            breakdown.sunday_or_holiday_minutes,
        )
        return breakdown

    def compute(self, interval: RegisteredInterval) -> OvertimeBreakdown:
        return self.compute_overtime(interval.start, interval.end, interval.shift_id)
