from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import FrozenSet, Iterable

from ..common.datetime_utils import parse_iso_date


@dataclass(frozen=True)
class HolidayCalendar:
    """Immutable set of holiday dates (no time component).

    ``version`` identifies the data set the dates were loaded from, so a
    computed record can be traced back to the calendar that produced it.
    """

    dates: FrozenSet[date] = field(default_factory=frozenset)
    version: str = "empty"

    @classmethod
    def from_iso(cls, values: Iterable[str], *, version: str = "inline") -> "HolidayCalendar":
        return cls(dates=frozenset(parse_iso_date(v) for v in values), version=version)

    def __contains__(self, day: object) -> bool:
        if isinstance(day, datetime):
            day = day.date()
        return day in self.dates

    def __len__(self) -> int:
        return len(self.dates)


@dataclass(frozen=True)
class DaySegment:
    """Part of a registered interval that lies on a single local calendar date.

    ``start`` and ``end`` are naive local datetimes, half-open ``[start, end)``.
    ``end`` may be the next day's midnight.
    """

    day: date
    start: datetime
    end: datetime

    @property
    def minutes(self) -> int:
        return int((self.end - self.start).total_seconds() // 60)
