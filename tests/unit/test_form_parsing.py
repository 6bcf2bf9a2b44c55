"""
Test suite for form value parsing.

System role: Verification of string-to-number and string-to-date conversion
"""

from datetime import datetime

import pytest

from mindfulness.api.routers.router_utils import parse_datetime, parse_int
from mindfulness.core.exceptions import ValidationError


@pytest.mark.parametrize(("value", "expected"), [("7", 7), (" 42 ", 42), ("-3", -3), ("+5", 5)])
def test_parse_int_accepts_plain_whole_numbers(value: str, expected: int) -> None:
    assert parse_int(value, "userId") == expected


@pytest.mark.parametrize("value", [None, "", "  ", "seven", "1.5", "1_0", "1e3", "0x10", "١٢"])
def test_parse_int_rejects_everything_else(value) -> None:
    with pytest.raises(ValidationError, match="userId must be a whole number") as exc_info:
        parse_int(value, "userId")
    assert exc_info.value.field == "userId"


def test_parse_datetime_returns_local_date_time() -> None:
    assert parse_datetime("2030-01-01T08:00", "scheduledAt") == datetime(2030, 1, 1, 8, 0)


@pytest.mark.parametrize("value", [None, "", "   "])
def test_parse_datetime_blank_is_none(value) -> None:
    assert parse_datetime(value, "scheduledAt") is None


@pytest.mark.parametrize(
    "value",
    ["next tuesday", "2030-01-01T08:00:00+05:30", "2030-01-01T08:00:00Z", "2030-01-01T08:00:00-00:00"],
)
def test_parse_datetime_rejects_malformed_or_offset_values(value: str) -> None:
    with pytest.raises(ValidationError, match="scheduledAt must be an ISO-8601 date-time"):
        parse_datetime(value, "scheduledAt")
