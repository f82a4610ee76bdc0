from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: an office employee.

    Note: plain data object, no database access here.
    """

    employee_id: int
    name: str
    role: str
    salary: int
    commission: int
    hire_date: date
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE
