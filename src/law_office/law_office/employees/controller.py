from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import current_role, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    @login_required
    def employees_list():
        if request.args.get("active") in ("1", "true"):
            return jsonify(svc.list_active(current_role=current_role()))
        return jsonify(svc.list_all(current_role=current_role()))

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="employees_get")
    @login_required
    def employees_get(employee_id: int):
        return jsonify(svc.get_employee(current_role=current_role(), employee_id=employee_id))

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @login_required
    def employees_create():
        data = json_body()
        employee = svc.create_employee(
            current_role=current_role(),
            name=data.get("name", ""),
            role=data.get("role", ""),
            salary=data.get("salary"),
            commission=data.get("commission"),
            hire_date=data.get("hire_date"),
            status=data.get("status") or "active",
        )
        return jsonify(employee), 201

    @app.route("/api/employees/<int:employee_id>", methods=["PUT", "PATCH"], endpoint="employees_update")
    @login_required
    def employees_update(employee_id: int):
        employee = svc.update_employee(current_role=current_role(), employee_id=employee_id, changes=json_body())
        return jsonify(employee)

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @login_required
    def employees_delete(employee_id: int):
        svc.delete_employee(current_role=current_role(), employee_id=employee_id)
        return "", 204
