from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request, session

from ..core.enums import Role
from ..container import Container
from .service import parse_weekday


def register(app: Flask, container: Container) -> None:
    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"error": "Debe iniciar sesión para continuar"}), 401

            if session.get("role") != Role.ADMIN.value:
                return jsonify({"error": "No tiene permisos para modificar horarios"}), 403

            return view(*args, **kwargs)

        return wrapper

    @app.route("/api/turnos", methods=["GET"], endpoint="shifts_list")
    def shifts_list():
        return jsonify(
            [
                {"id": s.shift_id, "nombre": s.name, "areaId": s.area_id, "activo": s.is_active}
                for s in container.shifts_repo.list_all()
            ]
        )

    @app.route("/api/turnos/<int:shift_id>/horarios/<dia>", methods=["GET"], endpoint="shift_windows")
    def shift_windows(shift_id: int, dia: str):
        windows = container.schedule_service.windows_for(shift_id, parse_weekday(dia))
        return jsonify([{"horaInicio": f"{w.start:%H:%M}", "horaFin": f"{w.end:%H:%M}"} for w in windows])

    @app.route("/api/turnos/<int:shift_id>/horarios", methods=["POST"], endpoint="shift_schedule_create")
    @admin_required
    def shift_schedule_create(shift_id: int):
        data = request.get_json(silent=True) or {}
        schedule_id = container.schedule_service.create_schedule(
            current_role=Role(session.get("role")),
            shift_id=shift_id,
            weekday=data.get("dia"),
            window_start=data.get("horaInicio"),
            window_end=data.get("horaFin"),
            break_start=data.get("descansoInicio"),
            break_end=data.get("descansoFin"),
        )
        return jsonify({"id": schedule_id}), 201

    @app.route("/api/horarios/<int:schedule_id>/desactivar", methods=["POST"], endpoint="shift_schedule_deactivate")
    @admin_required
    def shift_schedule_deactivate(schedule_id: int):
        container.schedule_service.deactivate(current_role=Role(session.get("role")), schedule_id=schedule_id)
        return "", 204
