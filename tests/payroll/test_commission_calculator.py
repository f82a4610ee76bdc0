from datetime import date, datetime

import pytest

from src.law_office.law_office.cases.model import Case
from src.law_office.law_office.employees.model import Employee
from src.law_office.law_office.payroll.calculator.commission_calculator import (
    CommissionPayrollCalculator,
    round_half_up,
)

WHEN = datetime(2025, 1, 1, 10, 0)


def _employee(salary=8000, commission=30):
    return Employee(
        employee_id=1,
        name="Marie Dubois",
        role="Associé Senior",
        salary=salary,
        commission=commission,
        hire_date=date(2023, 1, 15),
    )


def _cases(*fees):
    return [
        Case(
            case_id=i,
            client="c",
            case_type="Civil",
            employee_id=1,
            employee_name="Marie Dubois",
            fee=fee,
            expense=0,
            status="open",
            week="2025-W01",
            created_at=WHEN,
            updated_at=WHEN,
        )
        for i, fee in enumerate(fees, start=1)
    ]


def test_two_cases_no_bonus():
    line = CommissionPayrollCalculator().compute(_employee(), _cases(3000, 5000))

    assert line.case_count == 2
    assert line.commissions == 2400
    assert line.performance_bonus == 0
    assert line.total_compensation == 10400


def test_three_cases_is_not_enough_for_bonus():
    line = CommissionPayrollCalculator().compute(_employee(), _cases(100, 100, 100))
    assert line.performance_bonus == 0


def test_four_cases_earn_ten_percent_bonus():
    line = CommissionPayrollCalculator().compute(_employee(salary=3505), _cases(100, 100, 100, 100))

    assert line.performance_bonus == 351  # 350.5 rounds up
    assert line.total_compensation == round_half_up(3505 + 120 + 350.5)


def test_commission_is_rounded_once_not_per_case():
    # 15% of 5 is 0.75 each; per-case rounding would give 3, the sum gives 2.25 -> 2.
    line = CommissionPayrollCalculator().compute(_employee(salary=0, commission=15), _cases(5, 5, 5))
    assert line.commissions == 2


def test_no_cases_pays_base_salary():
    line = CommissionPayrollCalculator().compute(_employee(), [])
    assert (line.case_count, line.commissions, line.total_compensation) == (0, 0, 8000)


@pytest.mark.parametrize("value, expected", [(0.5, 1), (1.5, 2), (2.5, 3), (2.4999, 2), (10400.0, 10400)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
