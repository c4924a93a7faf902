from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...calendars.model import DaySegment, HolidayCalendar
from ...schedules.model import ScheduleWindow
from ..model import MinuteTally


class MinuteCounter(ABC):
    """Counter interface (Strategy Pattern for tallying one day segment)."""

    name: str = ""

    @abstractmethod
    def count(
        self,
        segment: DaySegment,
        windows: Sequence[ScheduleWindow],
        holidays: HolidayCalendar,
    ) -> MinuteTally:
        raise NotImplementedError
