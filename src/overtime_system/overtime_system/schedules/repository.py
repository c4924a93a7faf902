from __future__ import annotations

from datetime import time
from typing import Optional, Protocol, Sequence

from ..core.enums import Weekday
from .model import ScheduleWindow, ShiftSchedule


class ScheduleRepository(Protocol):
    def list_for_shift_and_weekday(
        self,
        *,
        shift_id: int,
        weekday: Weekday,
        include_inactive: bool = False,
    ) -> Sequence[ShiftSchedule]:
        raise NotImplementedError

    def get_by_id(self, schedule_id: int) -> Optional[ShiftSchedule]:
        raise NotImplementedError

    def create(
        self,
        *,
        shift_id: int,
        weekday: Weekday,
        window_start: time,
        window_end: time,
        break_start: Optional[time] = None,
        break_end: Optional[time] = None,
    ) -> int:
        """Insert an active schedule row.

        Returns schedule_id.
        """

        raise NotImplementedError

    def set_active(self, *, schedule_id: int, active: bool) -> bool:
        raise NotImplementedError


class WindowSource(Protocol):
    """What the overtime calculator needs from the schedule side."""

    def windows_for(self, shift_id: int, weekday: Weekday) -> Sequence[ScheduleWindow]:
        raise NotImplementedError
