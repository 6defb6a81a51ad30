from datetime import date, datetime
from typing import Any, Optional

from django.utils.dateparse import parse_date, parse_datetime


def parse_sgt_date(value: Any) -> Optional[date]:
    """
    Parse a date as returned by the SGT api.

    The api is not consistent: some endpoints return plain dates ("2024-03-01"),
    others full timestamps ("2024-03-01 18:30:00" or ISO 8601). Anything we
    cannot make sense of is treated as missing.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    try:
        parsed = parse_datetime(text)
        if parsed is not None:
            return parsed.date()
        parsed_date = parse_date(text)
        if parsed_date is not None:
            return parsed_date
        return parse_date(text[:10])
    except ValueError:
        return None


def to_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    if value is None or value == "":
        return default
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return default


def to_float(value: Any, default: Optional[float] = None) -> Optional[float]:
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def is_active_flag(value: Any) -> bool:
    return to_int(value) == 1
