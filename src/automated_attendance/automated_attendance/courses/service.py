from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..accounts.repository import AccountRepository
from ..core.constants import INSTRUCTOR_SEARCH_MIN_CHARS
from ..core.enums import Role
from ..core.exceptions import ServerError, TransportError, ValidationError
from .model import Course, InstructorOption
from .repository import CourseRepository

logger = logging.getLogger(__name__)


class CourseService:
    """Use case: manage courses (admin Courses screen)."""

    def __init__(self, courses: CourseRepository, accounts: AccountRepository):
        self._courses = courses
        self._accounts = accounts

    def list_courses(self) -> Sequence[Course]:
        return self._courses.list_courses()

    def get_course(self, course_id: str) -> Course:
        for course in self._courses.list_courses():
            if course.course_id == course_id:
                return course
        raise ValidationError("Course not found")

    def save(self, payload: dict, *, course_id: Optional[str] = None) -> Optional[Course]:
        """Create (no ``course_id``) or update. ``payload`` must come from ``build_payload``."""
        if course_id:
            saved = self._courses.update_course(course_id, payload)
            logger.info("Updated course %s (%s)", course_id, payload.get("courseCode"))
        else:
            saved = self._courses.create_course(payload)
            logger.info("Created course %s", payload.get("courseCode"))
        return saved

    def delete(self, course_id: str) -> None:
        self._courses.delete_course(course_id)
        logger.info("Deleted course %s", course_id)

    def search_instructors(self, query: str) -> list[InstructorOption]:
        query = query or ""
        if len(query) < INSTRUCTOR_SEARCH_MIN_CHARS:
            return []

        needle = query.lower()
        return [
            InstructorOption(account_id=acc.account_id, name=acc.full_name, id_number=acc.id_number)
            for acc in self._accounts.list_accounts(Role.INSTRUCTOR)
            if needle in acc.full_name.lower() or query in acc.id_number
        ]

    def backfill_instructor_ids(self) -> tuple[int, int]:
        """Re-key courses by instructor id number, one instructor at a time.

        Returns ``(updated, failed)``; a failure for one instructor does not stop the rest.
        """
        updated = failed = 0
        for acc in self._accounts.list_accounts(Role.INSTRUCTOR):
            try:
                self._courses.update_instructor_ids(instructor_name=acc.full_name, instructor_id=acc.id_number)
                updated += 1
            except (ServerError, TransportError) as e:
                logger.error("Failed to update courses for instructor %s: %s", acc.full_name, e)
                failed += 1
        return updated, failed
