from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.enums import EmployeeStatus
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        role: str,
        salary: int,
        commission: int,
        hire_date: date,
        status: EmployeeStatus,
    ) -> int:
        raise NotImplementedError

    def update(self, employee_id: int, changes: Mapping[str, Any]) -> bool:
        """Apply a partial update. Returns False when the row does not exist."""

        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def list_by_status(self, status: EmployeeStatus) -> Sequence[Employee]:
        raise NotImplementedError
