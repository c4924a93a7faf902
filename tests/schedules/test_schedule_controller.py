from __future__ import annotations

from dataclasses import replace

import pytest

from src.overtime_system.overtime_system.calendars.model import HolidayCalendar
from src.overtime_system.overtime_system.container import Container
from src.overtime_system.overtime_system.employees.model import Employee
from src.overtime_system.overtime_system.main import create_app
from src.overtime_system.overtime_system.overtime.calculator import OvertimeCalculator
from src.overtime_system.overtime_system.overtime.service import OvertimeService
from src.overtime_system.overtime_system.schedules.model import ShiftSchedule
from src.overtime_system.overtime_system.schedules.service import ScheduleService
from src.overtime_system.overtime_system.shifts.model import Shift


class InMemoryShifts:
    def __init__(self):
        self._shifts = {1: Shift(shift_id=1, name="Oficina", area_id=1)}

    def get_by_id(self, shift_id):
        return self._shifts.get(shift_id)

    def list_all(self):
        return list(self._shifts.values())


class InMemorySchedules:
    def __init__(self):
        self.rows: dict[int, ShiftSchedule] = {}

    def list_for_shift_and_weekday(self, *, shift_id, weekday, include_inactive=False):
        return [
            r
            for r in self.rows.values()
            if r.shift_id == shift_id and r.weekday == weekday and (include_inactive or r.active)
        ]

    def get_by_id(self, schedule_id):
        return self.rows.get(schedule_id)

    def create(self, *, shift_id, weekday, window_start, window_end, break_start=None, break_end=None):
        schedule_id = len(self.rows) + 1
        self.rows[schedule_id] = ShiftSchedule(
            schedule_id=schedule_id,
            shift_id=shift_id,
            weekday=weekday,
            window_start=window_start,
            window_end=window_end,
            break_start=break_start,
            break_end=break_end,
        )
        return schedule_id

    def set_active(self, *, schedule_id, active):
        if schedule_id not in self.rows:
            return False
        self.rows[schedule_id] = replace(self.rows[schedule_id], active=active)
        return True


class OneEmployee:
    def get_by_id(self, employee_id):
        if employee_id != 10:
            return None
        return Employee(employee_id=10, full_name="Ana Ruiz", document="1001", area_id=1, shift_id=1)


class NoUsers:
    def get_by_id(self, user_id):
        return None


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    shifts = InMemoryShifts()
    schedules = InMemorySchedules()
    schedule_service = ScheduleService(schedules, shifts)
    holidays = HolidayCalendar()
    calculator = OvertimeCalculator(schedule_service, holidays)
    container = Container(
        conn=None,
        shifts_repo=shifts,
        schedules_repo=schedules,
        employees_repo=None,
        users_repo=None,
        overtime_repo=None,
        holidays=holidays,
        schedule_service=schedule_service,
        overtime_calculator=calculator,
        overtime_service=OvertimeService(calculator, None, OneEmployee(), NoUsers()),
    )
    return create_app(container=container).test_client()


def _login(client, role):
    with client.session_transaction() as sess:
        sess["user_id"] = 1
        sess["role"] = role


def _calculate(client):
    resp = client.post(
        "/api/horas-extra/calcular",
        json={"empleadoId": 10, "horaInicio": "2025-10-14T08:00:00", "horaFin": "2025-10-14T18:00:00"},
    )
    assert resp.status_code == 200
    return resp.get_json()


def test_list_shifts(client):
    resp = client.get("/api/turnos")
    assert resp.get_json() == [{"id": 1, "nombre": "Oficina", "areaId": 1, "activo": True}]


def test_schedule_changes_are_seen_by_the_calculator(client):
    _login(client, "ADMIN")
    # nothing scheduled yet: every minute is overtime
    assert _calculate(client)["diurnas"] == 10.0

    resp = client.post(
        "/api/turnos/1/horarios",
        json={
            "dia": "martes",
            "horaInicio": "09:00",
            "horaFin": "17:00",
            "descansoInicio": "12:00",
            "descansoFin": "13:00",
        },
    )
    assert resp.status_code == 201
    schedule_id = resp.get_json()["id"]

    windows = client.get("/api/turnos/1/horarios/MARTES").get_json()
    assert windows == [{"horaInicio": "09:00", "horaFin": "12:00"}, {"horaInicio": "13:00", "horaFin": "17:00"}]
    assert _calculate(client)["diurnas"] == 3.0

    assert client.post(f"/api/horarios/{schedule_id}/desactivar").status_code == 204
    assert client.get("/api/turnos/1/horarios/MARTES").get_json() == []


def test_overlapping_schedule_is_rejected(client):
    _login(client, "ADMIN")
    client.post("/api/turnos/1/horarios", json={"dia": "LUNES", "horaInicio": "09:00", "horaFin": "17:00"})
    resp = client.post("/api/turnos/1/horarios", json={"dia": "LUNES", "horaInicio": "16:00", "horaFin": "20:00"})
    assert resp.status_code == 400


def test_unknown_shift_windows_is_404(client):
    assert client.get("/api/turnos/9/horarios/LUNES").status_code == 404


def test_bad_weekday_is_400(client):
    assert client.get("/api/turnos/1/horarios/FUNDAY").status_code == 400


def test_schedule_writes_need_an_admin(client):
    body = {"dia": "LUNES", "horaInicio": "09:00", "horaFin": "17:00"}
    assert client.post("/api/turnos/1/horarios", json=body).status_code == 401

    _login(client, "COORDINADOR")
    assert client.post("/api/turnos/1/horarios", json=body).status_code == 403
