from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Optional

from ..access.policy import PermissionPolicy
from ..common.datetime_utils import now_utc, to_naive_utc
from ..common.validators import (
    optional_text,
    require_non_empty,
    require_non_negative_int,
    require_positive_id,
)
from ..common.weeks import current_week_key, parse_week_key, week_key
from ..core.constants import COMPLETED_CASE_STATUSES, DEFAULT_CASE_STATUS, ONGOING_CASE_STATUSES
from ..core.enums import Action, EmployeeStatus
from ..core.exceptions import NotFound, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Case, DashboardStats, WeeklyStats
from .repository import CaseRepository

logger = logging.getLogger(__name__)


class CaseService:
    """Use case: the case ledger, archived by ISO week."""

    def __init__(
        self,
        cases: CaseRepository,
        employees: EmployeeRepository,
        policy: PermissionPolicy,
        *,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._cases = cases
        self._employees = employees
        self._policy = policy
        self._clock = clock

    def current_week(self) -> str:
        return current_week_key(self._clock)

    def create_case(
        self,
        *,
        current_role: str,
        client: str,
        case_type: str,
        employee_id: Any,
        fee: Any,
        expense: Any = 0,
        status: Optional[str] = DEFAULT_CASE_STATUS,
        description: Optional[str] = None,
    ) -> Case:
        self._policy.require(current_role, Action.CREATE)

        client = require_non_empty(client, "Client")
        case_type = require_non_empty(case_type, "Case type")
        employee_id = require_positive_id(employee_id, "Employee")
        fee = require_non_negative_int(fee, "Fee")
        expense = require_non_negative_int(0 if expense in (None, "") else expense, "Expense")
        status = optional_text(status) or DEFAULT_CASE_STATUS

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError(f"Employee {employee_id} does not exist")

        # The week bucket is fixed here and never recomputed.
        now = self._clock()
        case_id = self._cases.create(
            client=client,
            case_type=case_type,
            employee_id=employee.employee_id,
            employee_name=employee.name,
            fee=fee,
            expense=expense,
            status=status,
            description=optional_text(description),
            week=week_key(now),
            created_at=to_naive_utc(now),
        )
        logger.info("case %s created for employee %s (fee=%s)", case_id, employee.employee_id, fee)
        return self._get_or_raise(case_id)

    def _get_or_raise(self, case_id: int) -> Case:
        case = self._cases.get_by_id(case_id)
        if not case:
            raise NotFound(f"Case {case_id} does not exist")
        return case

    def set_status(self, *, current_role: str, case_id: Any, status: str) -> Case:
        """Any status may follow any other; concurrent calls are last-write-wins."""
        self._policy.require(current_role, Action.UPDATE)
        case_id = require_positive_id(case_id, "Case id")
        status = require_non_empty(status, "Status")

        if not self._cases.set_status(case_id, status=status, updated_at=to_naive_utc(self._clock())):
            raise NotFound(f"Case {case_id} does not exist")
        logger.info("case %s status -> %s", case_id, status)
        return self._get_or_raise(case_id)

    def delete_case(self, *, current_role: str, case_id: Any) -> None:
        self._policy.require(current_role, Action.DELETE)
        case_id = require_positive_id(case_id, "Case id")

        if not self._cases.delete_by_id(case_id):
            raise NotFound(f"Case {case_id} does not exist")
        logger.info("case %s deleted", case_id)

    def list_by_week(self, *, current_role: str, week: Optional[str] = None) -> list[Case]:
        self._policy.require(current_role, Action.READ)
        week = parse_week_key(week) if week else self.current_week()
        return list(self._cases.list_by_week(week))

    def list_all_weeks(self, *, current_role: str) -> list[str]:
        self._policy.require(current_role, Action.READ)
        return list(self._cases.list_weeks())

    def weekly_stats(self, *, current_role: str, week: Optional[str] = None) -> WeeklyStats:
        self._policy.require(current_role, Action.READ)
        week = parse_week_key(week) if week else self.current_week()
        cases = self._cases.list_by_week(week)

        revenue = sum(c.fee for c in cases)
        expenses = sum(c.expense for c in cases)
        return WeeklyStats(
            week=week,
            total_cases=len(cases),
            total_revenue=revenue,
            total_expenses=expenses,
            profit=revenue - expenses,
            completed_cases=sum(1 for c in cases if c.status.lower() in COMPLETED_CASE_STATUSES),
            ongoing_cases=sum(1 for c in cases if c.status.lower() in ONGOING_CASE_STATUSES),
        )

    def dashboard_stats(self, *, current_role: str) -> DashboardStats:
        self._policy.require(current_role, Action.READ)
        week = self.current_week()
        cases = self._cases.list_by_week(week)

        return DashboardStats(
            week=week,
            active_employees=len(self._employees.list_by_status(EmployeeStatus.ACTIVE)),
            current_week_cases=len(cases),
            current_week_revenue=sum(c.fee for c in cases),
            current_week_expenses=sum(c.expense for c in cases),
        )
