from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account class used for routing and authorization."""

    ADMIN = "admin"
    INSTRUCTOR = "instructor"
    STUDENT = "student"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def collection(self) -> str:
        """REST collection name (``students`` / ``instructors``)."""
        if self == Role.ADMIN:
            raise ValueError("Admin accounts are not stored remotely")
        return f"{self.value}s"


class Weekday(str, Enum):
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"
