from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Case


class CaseRepository(Protocol):
    def get_by_id(self, case_id: int) -> Optional[Case]:
        raise NotImplementedError

    def create(
        self,
        *,
        client: str,
        case_type: str,
        employee_id: int,
        employee_name: str,
        fee: int,
        expense: int,
        status: str,
        description: Optional[str],
        week: str,
        created_at: datetime,
    ) -> int:
        raise NotImplementedError

    def set_status(self, case_id: int, *, status: str, updated_at: datetime) -> bool:
        """Returns False when the case does not exist."""

        raise NotImplementedError

    def delete_by_id(self, case_id: int) -> bool:
        raise NotImplementedError

    def list_by_week(self, week: str) -> Sequence[Case]:
        """Newest first."""

        raise NotImplementedError

    def list_weeks(self) -> Sequence[str]:
        """Distinct week keys, newest first."""

        raise NotImplementedError
