from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Case:
    """Domain entity: a case file (dossier) archived under an ISO week."""

    case_id: int
    client: str
    case_type: str
    employee_id: int
    employee_name: str
    fee: int
    expense: int
    status: str
    week: str
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None


@dataclass(frozen=True)
class WeeklyStats:
    """Read-model: revenue figures of one week bucket."""

    week: str
    total_cases: int
    total_revenue: int
    total_expenses: int
    profit: int
    completed_cases: int
    ongoing_cases: int


@dataclass(frozen=True)
class DashboardStats:
    """Read-model: head count and figures of the current week."""

    week: str
    active_employees: int
    current_week_cases: int
    current_week_revenue: int
    current_week_expenses: int
