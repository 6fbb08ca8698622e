from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from ..core.exceptions import ValidationError


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_twelve_hour(value: Optional[str]) -> Optional[str]:
    """Convert a stored ``H:MM`` / ``HH:MM`` time into ``H:MM AM|PM``.

    Values already carrying an ``AM``/``PM`` marker (case-sensitive check) and
    empty values are returned unchanged. Minutes are copied verbatim.

    Hour 0 has no 12-hour rendering in the stored data contract, so it is
    rejected instead of being guessed as midnight.
    """
    if not value or "AM" in value or "PM" in value:
        return value

    hours, _, minutes = value.partition(":")
    try:
        hour = int(hours)
    except ValueError:
        raise ValidationError(f"Invalid time value: {value!r}")

    if hour == 0:
        raise ValidationError(f"Hour 0 cannot be shown in 12-hour form: {value!r}")
    if hour < 12:
        return f"{hour}:{minutes} AM"
    if hour == 12:
        return f"12:{minutes} PM"
    return f"{hour - 12}:{minutes} PM"


def last_n_days(today: date, n: int) -> list[date]:
    """The ``n`` days ending at ``today``, oldest first."""
    return [today - timedelta(days=i) for i in range(n - 1, -1, -1)]


def parse_timestamp(value) -> Optional[datetime]:
    """Parse an API ISO-8601 timestamp (``2024-05-01T10:00:00.000Z``) to local naive time."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed
