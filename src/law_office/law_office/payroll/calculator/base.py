from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...cases.model import Case
from ...employees.model import Employee
from ..model import PayrollLine


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(self, employee: Employee, cases: Sequence[Case]) -> PayrollLine:
        """`cases` are the week's cases already matched to `employee`."""
        raise NotImplementedError
