"""Field validation rules shared across entities"""

import re
from datetime import date, datetime
from typing import Any, Optional

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_PASSWORD_LENGTH = 6

# Ids are signed 64-bit integers in the database
MAX_ID = 2 ** 63 - 1


def is_valid_email(value: str) -> bool:
    return bool(value) and EMAIL_PATTERN.match(value) is not None


def parse_id(value: Any) -> Optional[int]:
    """Parse a positive integer identifier from an int or digit string"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if 0 < value <= MAX_ID else None
    if isinstance(value, str):
        text = value.strip()
        if not (text.isascii() and text.isdigit()) or len(text) > len(str(MAX_ID)):
            return None
        parsed = int(text)
        return parsed if 0 < parsed <= MAX_ID else None
    return None


def parse_date(value: Any) -> Optional[date]:
    """
    Parse a calendar date

    Accepts date and datetime objects and ISO 8601 strings; a time part
    (e.g. 2024-01-15T00:00:00Z) is ignored.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text[:10])
        except ValueError:
            return None
    return None
