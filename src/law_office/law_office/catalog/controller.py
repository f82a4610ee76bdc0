from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import current_role, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/services", methods=["GET"], endpoint="services_list")
    @login_required
    def services_list():
        return jsonify(container.catalog_service.list_services(current_role=current_role()))
