from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Callable, Mapping

from ..access.policy import PermissionPolicy
from ..common.datetime_utils import now_utc, parse_iso_date
from ..common.validators import (
    require_non_empty,
    require_non_negative_int,
    require_percent,
    require_positive_id,
)
from ..core.enums import Action, EmployeeStatus
from ..core.exceptions import NotFound, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_READ_ONLY_FIELDS = frozenset({"employee_id", "created_at", "updated_at"})


def _as_status(value: Any) -> EmployeeStatus:
    try:
        return EmployeeStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown employee status: {value!r}")


def _as_date(value: Any, field_name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value))
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")


class EmployeeService:
    """Use case: the employee registry (create, update, delete, list)."""

    def __init__(
        self,
        employees: EmployeeRepository,
        policy: PermissionPolicy,
        *,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._employees = employees
        self._policy = policy
        self._clock = clock

    def _get_or_raise(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFound(f"Employee {employee_id} does not exist")
        return employee

    def get_employee(self, *, current_role: str, employee_id: int) -> Employee:
        self._policy.require(current_role, Action.READ)
        return self._get_or_raise(require_positive_id(employee_id, "Employee id"))

    def list_all(self, *, current_role: str) -> list[Employee]:
        self._policy.require(current_role, Action.READ)
        return list(self._employees.list_all())

    def list_active(self, *, current_role: str) -> list[Employee]:
        self._policy.require(current_role, Action.READ)
        return list(self._employees.list_by_status(EmployeeStatus.ACTIVE))

    def create_employee(
        self,
        *,
        current_role: str,
        name: str,
        role: str,
        salary: Any,
        commission: Any,
        hire_date: Any = None,
        status: Any = EmployeeStatus.ACTIVE,
    ) -> Employee:
        self._policy.require(current_role, Action.CREATE)

        name = require_non_empty(name, "Name")
        role = require_non_empty(role, "Role")
        salary = require_non_negative_int(salary, "Salary")
        commission = require_percent(commission, "Commission")
        hired = _as_date(hire_date, "Hire date") if hire_date else self._clock().date()
        status = _as_status(status)

        employee_id = self._employees.create(
            name=name,
            role=role,
            salary=salary,
            commission=commission,
            hire_date=hired,
            status=status,
        )
        logger.info("employee %s created (%s, %s)", employee_id, name, role)
        return self._get_or_raise(employee_id)

    def update_employee(
        self, *, current_role: str, employee_id: int, changes: Mapping[str, Any]
    ) -> Employee:
        """Partial update: only the given fields change."""
        self._policy.require(current_role, Action.UPDATE)
        employee_id = require_positive_id(employee_id, "Employee id")

        clean: dict[str, Any] = {}
        for key, value in changes.items():
            if value is None or key in _READ_ONLY_FIELDS:
                continue
            if key == "name":
                clean["name"] = require_non_empty(value, "Name")
            elif key == "role":
                clean["role"] = require_non_empty(value, "Role")
            elif key == "salary":
                clean["salary"] = require_non_negative_int(value, "Salary")
            elif key == "commission":
                clean["commission"] = require_percent(value, "Commission")
            elif key == "hire_date":
                clean["hire_date"] = _as_date(value, "Hire date")
            elif key == "status":
                clean["status"] = _as_status(value)
            else:
                raise ValidationError(f"Unknown employee field: {key}")

        if not self._employees.update(employee_id, clean):
            raise NotFound(f"Employee {employee_id} does not exist")
        logger.info("employee %s updated: %s", employee_id, sorted(clean))
        return self._get_or_raise(employee_id)

    def delete_employee(self, *, current_role: str, employee_id: int) -> None:
        """Hard delete. Cases keep their employee reference and name snapshot."""
        self._policy.require(current_role, Action.DELETE)
        employee_id = require_positive_id(employee_id, "Employee id")

        if not self._employees.delete_by_id(employee_id):
            raise NotFound(f"Employee {employee_id} does not exist")
        logger.info("employee %s deleted", employee_id)
