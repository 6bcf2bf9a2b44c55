"""
Form and query value parsing.

HTTP inputs arrive as strings; malformed numbers or dates are reported as
validation failures naming the offending field.
"""

import re
from datetime import datetime

from mindfulness.core.exceptions import ValidationError

WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str | None, field: str) -> int:
    """
    Parse a required whole number: optional sign, then ASCII digits only.

    Raises:
        ValidationError: If the value is missing or not an integer
    """
    text = (value or "").strip()
    if not WHOLE_NUMBER.fullmatch(text):
        raise ValidationError(f"{field} must be a whole number", field=field)
    return int(text)


def parse_datetime(value: str | None, field: str) -> datetime | None:
    """
    Parse an ISO-8601 local date-time such as 2026-10-19T07:30.

    Values carrying a UTC offset or Z are rejected; stored times are local
    wall-clock times.

    Returns:
        datetime | None: None when the value is missing or blank

    Raises:
        ValidationError: If the value is present but not a valid local date-time
    """
    if value is None or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        parsed = None
    if parsed is None or parsed.tzinfo is not None:
        raise ValidationError(f"{field} must be an ISO-8601 date-time", field=field)
    return parsed
