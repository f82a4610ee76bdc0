from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import current_role, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.client_service

    @app.route("/api/clients", methods=["GET"], endpoint="clients_list")
    @login_required
    def clients_list():
        return jsonify(svc.list_clients(current_role=current_role()))

    @app.route("/api/clients", methods=["POST"], endpoint="clients_create")
    @login_required
    def clients_create():
        data = json_body()
        client = svc.create_client(
            current_role=current_role(),
            last_name=data.get("last_name", ""),
            first_name=data.get("first_name", ""),
            email=data.get("email"),
            phone=data.get("phone"),
            address=data.get("address"),
            birth_date=data.get("birth_date"),
            profession=data.get("profession"),
            notes=data.get("notes"),
        )
        return jsonify(client), 201
