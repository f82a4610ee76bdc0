import pytest

from src.law_office.law_office.common.validators import (
    require_non_negative_int,
    require_percent,
    require_positive_id,
)
from src.law_office.law_office.core.constants import MAX_INT_VALUE
from src.law_office.law_office.core.exceptions import ValidationError


def test_non_negative_int_accepts_ints_and_digit_strings():
    assert require_non_negative_int(0, "Fee") == 0
    assert require_non_negative_int(" 1200 ", "Fee") == 1200
    assert require_non_negative_int(MAX_INT_VALUE, "Fee") == MAX_INT_VALUE


@pytest.mark.parametrize("bad", [-1, "-5", 2.0, True, None, "1e3", MAX_INT_VALUE + 1, 10**12, str(10**12)])
def test_non_negative_int_rejects(bad):
    with pytest.raises(ValidationError):
        require_non_negative_int(bad, "Fee")


def test_percent_bounds():
    assert require_percent(100, "Commission") == 100
    with pytest.raises(ValidationError):
        require_percent(101, "Commission")


def test_positive_id_accepts_ints_and_digit_strings():
    assert require_positive_id(3, "Case id") == 3
    assert require_positive_id("7", "Case id") == 7


@pytest.mark.parametrize("bad", [0, -2, True, False, 2.7, 2.0, "", "x", None, MAX_INT_VALUE + 1])
def test_positive_id_rejects(bad):
    with pytest.raises(ValidationError):
        require_positive_id(bad, "Case id")
