from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request, session

from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"error": "Debe iniciar sesión para continuar"}), 401
            return view(*args, **kwargs)

        return wrapper

    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(AuthorizationError)
    def _forbidden(e: AuthorizationError):
        return jsonify({"error": str(e)}), 403

    @app.route("/api/horas-extra/calcular", methods=["POST"], endpoint="overtime_calculate")
    @login_required
    def overtime_calculate():
        data = request.get_json(silent=True) or {}
        result = container.overtime_service.calculate(
            employee_id=data.get("empleadoId"),
            shift_id=data.get("turnoId"),
            hora_inicio=data.get("horaInicio"),
            hora_fin=data.get("horaFin"),
        )
        return jsonify(result)

    @app.route("/api/horas-extra", methods=["POST"], endpoint="overtime_create")
    @login_required
    def overtime_create():
        data = request.get_json(silent=True) or {}
        record_id = container.overtime_service.create_record(
            coordinator_id=session["user_id"],
            employee_id=data.get("empleadoId"),
            shift_id=data.get("turnoId"),
            hora_inicio=data.get("horaInicio"),
            hora_fin=data.get("horaFin"),
            observaciones=data.get("observaciones"),
            nro_solicitud=data.get("nroSolicitud"),
        )
        record = container.overtime_service.get_record(record_id)
        return jsonify(record.to_payload()), 201

    @app.route("/api/horas-extra/<int:record_id>", methods=["GET"], endpoint="overtime_detail")
    @login_required
    def overtime_detail(record_id: int):
        return jsonify(container.overtime_service.get_record(record_id).to_payload())

    @app.route("/api/empleados/<int:employee_id>/horas-extra", methods=["GET"], endpoint="overtime_by_employee")
    @login_required
    def overtime_by_employee(employee_id: int):
        records = container.overtime_service.list_for_employee(employee_id)
        return jsonify([r.to_payload() for r in records])

    @app.route("/api/horas-extra", methods=["GET"], endpoint="overtime_list")
    @login_required
    def overtime_list():
        records = container.overtime_service.list_all(current_user_id=session["user_id"])
        return jsonify([r.to_payload() for r in records])

    @app.route("/api/horas-extra/estado/<estado>", methods=["GET"], endpoint="overtime_by_status")
    @login_required
    def overtime_by_status(estado: str):
        records = container.overtime_service.list_by_status(estado)
        return jsonify([r.to_payload() for r in records])

    @app.route(
        "/api/coordinadores/<int:coordinator_id>/horas-extra", methods=["GET"], endpoint="overtime_by_coordinator"
    )
    @login_required
    def overtime_by_coordinator(coordinator_id: int):
        records = container.overtime_service.list_for_coordinator(coordinator_id)
        return jsonify([r.to_payload() for r in records])
