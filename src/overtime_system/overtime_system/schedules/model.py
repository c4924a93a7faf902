from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import List, Optional

from ..core.enums import Weekday


@dataclass(frozen=True)
class ScheduleWindow:
    """Half-open working window ``[start, end)`` on a nominal day."""

    start: time
    end: time

    def contains(self, moment: time) -> bool:
        return self.start <= moment < self.end

    def overlaps(self, other: "ScheduleWindow") -> bool:
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True)
class ShiftSchedule:
    """Domain entity: one horario row of a shift for one weekday.

    A row with a break describes a split shift and yields two windows.
    """

    schedule_id: int
    shift_id: int
    weekday: Weekday
    window_start: time
    window_end: time
    break_start: Optional[time] = None
    break_end: Optional[time] = None
    active: bool = True

    def working_windows(self) -> List[ScheduleWindow]:
        if self.break_start is not None and self.break_end is not None:
            return [
                ScheduleWindow(self.window_start, self.break_start),
                ScheduleWindow(self.break_end, self.window_end),
            ]
        return [ScheduleWindow(self.window_start, self.window_end)]
