from __future__ import annotations

from typing import Any, Optional

from ..core.constants import MAX_COMMISSION_PERCENT, MAX_INT_VALUE
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _as_int(value: Any) -> Optional[int]:
    """ints and digit strings from forms; None for bools, floats and anything else."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    if isinstance(value, int):
        return value
    return None


def require_non_negative_int(value: Any, field_name: str) -> int:
    """Accept ints (and digit strings from forms); reject bools, floats, negatives."""
    number = _as_int(value)
    if number is None:
        raise ValidationError(f"{field_name} must be an integer")
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    if number > MAX_INT_VALUE:
        raise ValidationError(f"{field_name} must not exceed {MAX_INT_VALUE}")
    return number


def require_percent(value: Any, field_name: str) -> int:
    value = require_non_negative_int(value, field_name)
    if value > MAX_COMMISSION_PERCENT:
        raise ValidationError(f"{field_name} must be between 0 and {MAX_COMMISSION_PERCENT}")
    return value


def require_positive_id(value: Any, field_name: str) -> int:
    number = _as_int(value)
    if number is None or number <= 0 or number > MAX_INT_VALUE:
        raise ValidationError(f"{field_name} is invalid")
    return number
