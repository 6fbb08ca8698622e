from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..accounts.repository import AccountRepository
from ..common.datetime_utils import last_n_days, now_local
from ..core.constants import TREND_DAYS
from ..core.enums import Role
from ..core.exceptions import ServerError, TransportError
from ..courses.repository import CourseRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Statistics:
    students: int
    instructors: int
    courses: int


@dataclass(frozen=True)
class Trend:
    labels: list[str]
    data: list[int]


class DashboardService:
    """Use case: admin dashboard counts and the new-student trend."""

    def __init__(self, accounts: AccountRepository, courses: CourseRepository):
        self._accounts = accounts
        self._courses = courses

    def statistics(self) -> Statistics:
        return Statistics(
            students=len(self._accounts.list_accounts(Role.STUDENT)),
            instructors=len(self._accounts.list_accounts(Role.INSTRUCTOR)),
            courses=len(self._courses.list_courses()),
        )

    def trend(self, *, today: Optional[date] = None) -> Trend:
        """Students created per day over the last week, oldest day first."""
        today = today or now_local().date()
        try:
            students = self._accounts.list_accounts(Role.STUDENT)
        except (ServerError, TransportError) as e:
            logger.error("Error fetching trend data: %s", e)
            return Trend(labels=[""], data=[0])

        days = last_n_days(today, TREND_DAYS)
        created = [s.created_at.date() for s in students if s.created_at]
        return Trend(
            labels=[d.strftime("%m/%d") for d in days],
            data=[sum(1 for c in created if c == d) for d in days],
        )
