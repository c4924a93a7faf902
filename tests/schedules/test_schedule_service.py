from __future__ import annotations

from datetime import time
from typing import Optional

import pytest

from src.overtime_system.overtime_system.core.enums import Role, Weekday
from src.overtime_system.overtime_system.core.exceptions import (
    AuthorizationError,
    NotFoundError,
    UnresolvableScheduleError,
    ValidationError,
)
from src.overtime_system.overtime_system.schedules.model import ScheduleWindow, ShiftSchedule
from src.overtime_system.overtime_system.schedules.service import ScheduleService, WeeklyWindowCache
from src.overtime_system.overtime_system.shifts.model import Shift


class InMemoryShifts:
    def __init__(self, *shift_ids: int):
        self._shifts = {i: Shift(shift_id=i, name=f"Turno {i}") for i in shift_ids}

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        return self._shifts.get(shift_id)

    def list_all(self):
        return list(self._shifts.values())


class InMemorySchedules:
    def __init__(self):
        self.rows: dict[int, ShiftSchedule] = {}
        self._next_id = 1

    def add(self, **kwargs) -> ShiftSchedule:
        row = ShiftSchedule(schedule_id=self._next_id, **kwargs)
        self.rows[row.schedule_id] = row
        self._next_id += 1
        return row

    def list_for_shift_and_weekday(self, *, shift_id, weekday, include_inactive=False):
        return [
            r
            for r in self.rows.values()
            if r.shift_id == shift_id and r.weekday == weekday and (include_inactive or r.active)
        ]

    def get_by_id(self, schedule_id):
        return self.rows.get(schedule_id)

    def create(self, *, shift_id, weekday, window_start, window_end, break_start=None, break_end=None) -> int:
        return self.add(
            shift_id=shift_id,
            weekday=weekday,
            window_start=window_start,
            window_end=window_end,
            break_start=break_start,
            break_end=break_end,
        ).schedule_id

    def set_active(self, *, schedule_id, active):
        row = self.rows.get(schedule_id)
        if not row:
            return False
        self.rows[schedule_id] = ShiftSchedule(
            schedule_id=row.schedule_id,
            shift_id=row.shift_id,
            weekday=row.weekday,
            window_start=row.window_start,
            window_end=row.window_end,
            break_start=row.break_start,
            break_end=row.break_end,
            active=active,
        )
        return True


def _service():
    schedules = InMemorySchedules()
    return ScheduleService(schedules, InMemoryShifts(1, 2)), schedules


def test_windows_for_returns_active_windows_in_start_order():
    svc, schedules = _service()
    schedules.add(shift_id=1, weekday=Weekday.LUNES, window_start=time(14, 0), window_end=time(18, 0))
    schedules.add(shift_id=1, weekday=Weekday.LUNES, window_start=time(6, 0), window_end=time(10, 0))
    schedules.add(shift_id=1, weekday=Weekday.LUNES, window_start=time(11, 0), window_end=time(12, 0), active=False)
    schedules.add(shift_id=2, weekday=Weekday.LUNES, window_start=time(0, 0), window_end=time(23, 0))

    windows = svc.windows_for(1, Weekday.LUNES)

    assert windows == [ScheduleWindow(time(6, 0), time(10, 0)), ScheduleWindow(time(14, 0), time(18, 0))]


def test_break_splits_a_row_into_two_windows():
    svc, schedules = _service()
    schedules.add(
        shift_id=1,
        weekday=Weekday.MARTES,
        window_start=time(8, 0),
        window_end=time(17, 0),
        break_start=time(12, 0),
        break_end=time(13, 0),
    )

    assert svc.windows_for(1, Weekday.MARTES) == [
        ScheduleWindow(time(8, 0), time(12, 0)),
        ScheduleWindow(time(13, 0), time(17, 0)),
    ]


def test_day_without_windows_is_empty_not_an_error():
    svc, _ = _service()
    assert svc.windows_for(1, Weekday.DOMINGO) == []


def test_unknown_shift_is_unresolvable():
    svc, _ = _service()
    with pytest.raises(UnresolvableScheduleError):
        svc.windows_for(99, Weekday.LUNES)


def test_window_is_half_open():
    window = ScheduleWindow(time(9, 0), time(17, 0))
    assert window.contains(time(9, 0))
    assert window.contains(time(16, 59))
    assert not window.contains(time(17, 0))


def test_admin_creates_schedule_from_strings():
    svc, schedules = _service()
    schedule_id = svc.create_schedule(
        current_role=Role.ADMIN,
        shift_id=1,
        weekday="viernes",
        window_start="07:00",
        window_end="16:00",
        break_start="12:00",
        break_end="12:30",
    )

    row = schedules.get_by_id(schedule_id)
    assert row.weekday == Weekday.VIERNES
    assert row.window_start == time(7, 0)
    assert row.break_end == time(12, 30)


def test_coordinator_cannot_create_schedule():
    svc, _ = _service()
    with pytest.raises(AuthorizationError):
        svc.create_schedule(
            current_role=Role.COORDINADOR,
            shift_id=1,
            weekday="LUNES",
            window_start="07:00",
            window_end="16:00",
        )


@pytest.mark.parametrize(
    "kwargs",
    [
        {"weekday": "FUNDAY", "window_start": "07:00", "window_end": "16:00"},
        {"weekday": "LUNES", "window_start": "16:00", "window_end": "07:00"},
        {"weekday": "LUNES", "window_start": "7am", "window_end": "16:00"},
        {"weekday": "LUNES", "window_start": "07:00", "window_end": "16:00", "break_start": "12:00"},
        {"weekday": "LUNES", "window_start": "07:00", "window_end": "16:00", "break_start": "06:00", "break_end": "08:00"},
        {"weekday": "LUNES", "window_start": "07:00", "window_end": "16:00", "break_start": "13:00", "break_end": "12:00"},
    ],
)
def test_create_schedule_rejects_invalid_input(kwargs):
    svc, _ = _service()
    with pytest.raises(ValidationError):
        svc.create_schedule(current_role=Role.ADMIN, shift_id=1, **kwargs)


def test_create_schedule_for_unknown_shift():
    svc, _ = _service()
    with pytest.raises(NotFoundError):
        svc.create_schedule(
            current_role=Role.ADMIN,
            shift_id=42,
            weekday="LUNES",
            window_start="07:00",
            window_end="16:00",
        )


def test_overlapping_windows_are_rejected():
    svc, schedules = _service()
    schedules.add(shift_id=1, weekday=Weekday.LUNES, window_start=time(6, 0), window_end=time(10, 0))

    with pytest.raises(ValidationError):
        svc.create_schedule(
            current_role=Role.ADMIN,
            shift_id=1,
            weekday="LUNES",
            window_start="09:00",
            window_end="12:00",
        )


def test_adjacent_windows_and_windows_inside_a_break_are_allowed():
    svc, schedules = _service()
    schedules.add(
        shift_id=1,
        weekday=Weekday.LUNES,
        window_start=time(6, 0),
        window_end=time(18, 0),
        break_start=time(11, 0),
        break_end=time(13, 0),
    )

    svc.create_schedule(current_role=Role.ADMIN, shift_id=1, weekday="LUNES", window_start="18:00", window_end="20:00")
    svc.create_schedule(current_role=Role.ADMIN, shift_id=1, weekday="LUNES", window_start="11:30", window_end="12:30")

    assert len(svc.windows_for(1, Weekday.LUNES)) == 4


def test_deactivated_window_no_longer_counts():
    svc, schedules = _service()
    row = schedules.add(shift_id=1, weekday=Weekday.LUNES, window_start=time(6, 0), window_end=time(10, 0))

    svc.deactivate(current_role=Role.ADMIN, schedule_id=row.schedule_id)

    assert svc.windows_for(1, Weekday.LUNES) == []


def test_deactivate_unknown_schedule():
    svc, _ = _service()
    with pytest.raises(NotFoundError):
        svc.deactivate(current_role=Role.ADMIN, schedule_id=7)


def test_weekly_cache_fetches_each_weekday_once():
    calls: list[Weekday] = []

    class CountingSource:
        def windows_for(self, shift_id, weekday):
            calls.append(weekday)
            return [ScheduleWindow(time(9, 0), time(17, 0))]

    cache = WeeklyWindowCache(CountingSource(), 1)
    cache.get(Weekday.LUNES)
    cache.get(Weekday.LUNES)
    cache.get(Weekday.MARTES)

    assert calls == [Weekday.LUNES, Weekday.MARTES]
