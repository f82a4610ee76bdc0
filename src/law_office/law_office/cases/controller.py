from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import current_role, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.case_service

    @app.route("/api/cases", methods=["GET"], endpoint="cases_list")
    @login_required
    def cases_list():
        week = request.args.get("week") or None
        cases = svc.list_by_week(current_role=current_role(), week=week)
        return jsonify({"week": week or svc.current_week(), "cases": cases})

    @app.route("/api/cases", methods=["POST"], endpoint="cases_create")
    @login_required
    def cases_create():
        data = json_body()
        case = svc.create_case(
            current_role=current_role(),
            client=data.get("client", ""),
            case_type=data.get("case_type", ""),
            employee_id=data.get("employee_id"),
            fee=data.get("fee"),
            expense=data.get("expense", 0),
            status=data.get("status"),
            description=data.get("description"),
        )
        return jsonify(case), 201

    @app.route("/api/cases/<int:case_id>/status", methods=["PATCH", "PUT"], endpoint="cases_set_status")
    @login_required
    def cases_set_status(case_id: int):
        data = json_body()
        case = svc.set_status(current_role=current_role(), case_id=case_id, status=data.get("status", ""))
        return jsonify(case)

    @app.route("/api/cases/<int:case_id>", methods=["DELETE"], endpoint="cases_delete")
    @login_required
    def cases_delete(case_id: int):
        svc.delete_case(current_role=current_role(), case_id=case_id)
        return "", 204

    @app.route("/api/weeks", methods=["GET"], endpoint="weeks_list")
    @login_required
    def weeks_list():
        return jsonify({"current": svc.current_week(), "weeks": svc.list_all_weeks(current_role=current_role())})

    @app.route("/api/weeks/<week>/stats", methods=["GET"], endpoint="weeks_stats")
    @login_required
    def weeks_stats(week: str):
        return jsonify(svc.weekly_stats(current_role=current_role(), week=week))

    @app.route("/api/stats/dashboard", methods=["GET"], endpoint="stats_dashboard")
    @login_required
    def stats_dashboard():
        return jsonify(svc.dashboard_stats(current_role=current_role()))
