from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from typing import Callable, Optional

from ..access.policy import PermissionPolicy
from ..cases.model import Case
from ..common.datetime_utils import now_utc
from ..common.weeks import current_week_key, parse_week_key
from ..core.enums import Action
from .calculator.base import PayrollCalculator
from .calculator.commission_calculator import CommissionPayrollCalculator, round_half_up
from .model import EmployeePerformance, PayrollReport
from .repository import PayrollSnapshotSource


class PayrollService:
    """Use case: weekly payroll and all-time performance of active employees. Read-only."""

    def __init__(
        self,
        source: PayrollSnapshotSource,
        policy: PermissionPolicy,
        *,
        calculator: Optional[PayrollCalculator] = None,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._source = source
        self._policy = policy
        self._calculator = calculator or CommissionPayrollCalculator()
        self._clock = clock

    def build_report(self, *, current_role: str, week: Optional[str] = None) -> PayrollReport:
        self._policy.require(current_role, Action.READ)
        week = parse_week_key(week) if week else current_week_key(self._clock)

        employees, cases = self._source.snapshot(week)

        by_employee: dict[int, list[Case]] = defaultdict(list)
        for case in cases:
            by_employee[case.employee_id].append(case)

        lines = [
            self._calculator.compute(e, by_employee.get(e.employee_id, []))
            for e in employees
            if e.is_active
        ]
        lines.sort(key=lambda line: (line.name, line.employee_id))
        return PayrollReport(week=week, lines=lines)

    def employee_performance(self, *, current_role: str) -> list[EmployeePerformance]:
        """Cases handled, fees brought in and commission earned, across all weeks."""
        self._policy.require(current_role, Action.READ)
        employees, totals = self._source.performance_snapshot()

        rows = []
        for e in employees:
            if not e.is_active:
                continue
            handled, revenue = totals.get(e.employee_id, (0, 0))
            rows.append(
                EmployeePerformance(
                    employee_id=e.employee_id,
                    name=e.name,
                    role=e.role,
                    salary=e.salary,
                    commission=e.commission,
                    cases_handled=handled,
                    revenue_generated=revenue,
                    total_commission=round_half_up(revenue * e.commission / 100),
                )
            )
        rows.sort(key=lambda p: (-p.revenue_generated, p.name, p.employee_id))
        return rows
