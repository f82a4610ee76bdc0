from datetime import date, datetime, timedelta, timezone

import pytest

from src.law_office.law_office.common.weeks import current_week_key, parse_week_key, week_key
from src.law_office.law_office.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "day, expected",
    [
        (date(2025, 1, 1), "2025-W01"),  # Wednesday
        (date(2024, 12, 31), "2025-W01"),  # Tuesday, rolls into next ISO year
        (date(2023, 1, 1), "2022-W52"),  # Sunday, belongs to previous ISO year
        (date(2021, 1, 3), "2020-W53"),  # 2020 has 53 ISO weeks
        (date(2025, 9, 10), "2025-W37"),
    ],
)
def test_week_key_matches_iso_8601(day, expected):
    assert week_key(day) == expected


def test_week_key_normalizes_aware_datetime_to_utc():
    # Monday 00:30 in Paris is still Sunday in UTC.
    paris = timezone(timedelta(hours=1))
    assert week_key(datetime(2025, 1, 6, 0, 30, tzinfo=paris)) == "2025-W01"
    assert week_key(datetime(2025, 1, 6, 0, 30, tzinfo=timezone.utc)) == "2025-W02"


def test_week_key_takes_naive_datetime_as_utc():
    assert week_key(datetime(2024, 12, 30, 23, 59)) == "2025-W01"


def test_current_week_key_uses_clock():
    assert current_week_key(lambda: datetime(2023, 1, 1, tzinfo=timezone.utc)) == "2022-W52"


def test_parse_week_key_accepts_valid_keys():
    assert parse_week_key(" 2020-W53 ") == "2020-W53"


@pytest.mark.parametrize("bad", ["", "2025-1", "2025-W00", "2025-W53", "W01-2025", "2025W01", "0000-W01"])
def test_parse_week_key_rejects_malformed(bad):
    with pytest.raises(ValidationError):
        parse_week_key(bad)
