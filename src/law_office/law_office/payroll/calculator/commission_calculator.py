from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from ...cases.model import Case
from ...core.constants import PERFORMANCE_BONUS_RATE, PERFORMANCE_BONUS_THRESHOLD
from ...employees.model import Employee
from ..model import PayrollLine
from .base import PayrollCalculator


def round_half_up(value: float) -> int:
    """Nearest integer, halves away from zero (2.5 -> 3), unlike round()."""
    return int(Decimal(repr(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class CommissionPayrollCalculator(PayrollCalculator):
    """Standard rule: salary + commission on fees + bonus above a case threshold.

    Commission is summed in floating point and rounded once, not per case.
    """

    def __init__(
        self,
        *,
        bonus_threshold: int = PERFORMANCE_BONUS_THRESHOLD,
        bonus_rate: float = PERFORMANCE_BONUS_RATE,
    ):
        self._bonus_threshold = int(bonus_threshold)
        self._bonus_rate = float(bonus_rate)

    def compute(self, employee: Employee, cases: Sequence[Case]) -> PayrollLine:
        salary = employee.salary
        commission_total = sum(c.fee * employee.commission / 100 for c in cases)
        bonus = salary * self._bonus_rate if len(cases) > self._bonus_threshold else 0.0

        return PayrollLine(
            employee_id=employee.employee_id,
            name=employee.name,
            role=employee.role,
            salary=salary,
            commission=employee.commission,
            hire_date=employee.hire_date,
            status=employee.status,
            case_count=len(cases),
            commissions=round_half_up(commission_total),
            performance_bonus=round_half_up(bonus),
            total_compensation=round_half_up(salary + commission_total + bonus),
        )
