from __future__ import annotations

from datetime import datetime, timezone

from flask import Flask, jsonify, session

from ..common.web import json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))

        session.clear()
        session["user_id"] = s_user.user_id
        session["username"] = s_user.username
        session["role"] = s_user.role
        return jsonify({"user": s_user})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"ok": True})

    @app.route("/api/me", endpoint="me")
    @login_required
    def me():
        return jsonify(
            {
                "user_id": session["user_id"],
                "username": session.get("username"),
                "role": session.get("role"),
                "permissions": sorted(a.value for a in container.policy.allowed(session.get("role"))),
            }
        )

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()})
