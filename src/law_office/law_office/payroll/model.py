from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class PayrollLine:
    """Weekly compensation of one employee. Computed, never stored."""

    employee_id: int
    name: str
    role: str
    salary: int
    commission: int
    hire_date: date
    status: EmployeeStatus
    case_count: int
    commissions: int
    performance_bonus: int
    total_compensation: int


@dataclass(frozen=True)
class PayrollReport:
    week: str
    lines: list[PayrollLine]

    @property
    def summary(self) -> dict:
        return {
            "week": self.week,
            "employees": len(self.lines),
            "total_salaries": sum(line.salary for line in self.lines),
            "total_commissions": sum(line.commissions for line in self.lines),
            "total_bonuses": sum(line.performance_bonus for line in self.lines),
            "total_compensation": sum(line.total_compensation for line in self.lines),
        }


@dataclass(frozen=True)
class EmployeePerformance:
    """All-time case totals of one active employee."""

    employee_id: int
    name: str
    role: str
    salary: int
    commission: int
    cases_handled: int
    revenue_generated: int
    total_commission: int
