from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import current_role, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_report")
    @login_required
    def payroll_report():
        report = container.payroll_service.build_report(
            current_role=current_role(),
            week=request.args.get("week") or None,
        )
        return jsonify({"week": report.week, "lines": report.lines, "summary": report.summary})

    @app.route("/api/employees/performance", methods=["GET"], endpoint="employees_performance")
    @login_required
    def employees_performance():
        return jsonify(container.payroll_service.employee_performance(current_role=current_role()))
