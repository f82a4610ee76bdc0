from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import current_role, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.appointment_service

    @app.route("/api/appointments", methods=["GET"], endpoint="appointments_list")
    @login_required
    def appointments_list():
        return jsonify(svc.list_appointments(current_role=current_role()))

    @app.route("/api/appointments", methods=["POST"], endpoint="appointments_create")
    @login_required
    def appointments_create():
        data = json_body()
        appointment = svc.create_appointment(
            current_role=current_role(),
            client_id=data.get("client_id"),
            title=data.get("title", ""),
            scheduled_at=data.get("scheduled_at"),
            duration_minutes=data.get("duration_minutes"),
            case_id=data.get("case_id"),
            description=data.get("description"),
            location=data.get("location"),
            status=data.get("status"),
        )
        return jsonify(appointment), 201
