from datetime import date, datetime

import pytest

from hrms.common.datetime_utils import (
    normalize_period,
    parse_iso_datetime,
    parse_optional_date,
    parse_period,
)
from hrms.core.exceptions import ValidationError


def test_period_must_be_zero_padded():
    assert normalize_period("2025-03") == "2025-03"
    assert parse_period("2024-02") == (date(2024, 2, 1), date(2024, 2, 29))

    for bad in ("2025-3", "2025-13", "2025-00", "202503", 202503, None):
        with pytest.raises(ValidationError):
            normalize_period(bad)


def test_local_timestamps_parse():
    assert parse_iso_datetime("2025-03-03T09:15:00") == datetime(2025, 3, 3, 9, 15)


def test_timestamps_with_offset_are_refused():
    with pytest.raises(ValidationError, match="UTC offset"):
        parse_iso_datetime("2025-03-03T09:00:00+00:00")


def test_non_string_values_are_validation_errors():
    with pytest.raises(ValidationError):
        parse_iso_datetime(1741000000)
    with pytest.raises(ValidationError):
        parse_optional_date(20230101)


def test_optional_date_passes_dates_through():
    assert parse_optional_date(None) is None
    assert parse_optional_date("  ") is None
    assert parse_optional_date(date(2023, 1, 1)) == date(2023, 1, 1)
    assert parse_optional_date(datetime(2023, 1, 1, 8, 0)) == date(2023, 1, 1)
    assert parse_optional_date("2023-01-01") == date(2023, 1, 1)
