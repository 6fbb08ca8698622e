from __future__ import annotations

import re

from ..core.exceptions import ValidationError

TWELVE_HOUR_PATTERN = re.compile(r"(0?[1-9]|1[0-2]):[0-5][0-9]\s?(AM|PM)", re.IGNORECASE)


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def is_twelve_hour_time(value) -> bool:
    """True for ``H:MM AM`` / ``HH:MMPM`` style strings (marker case-insensitive)."""
    if not isinstance(value, str):
        return False
    return TWELVE_HOUR_PATTERN.fullmatch(value) is not None
