from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Course


class CourseRepository(Protocol):
    def list_courses(self) -> Sequence[Course]:
        raise NotImplementedError

    def create_course(self, payload: dict) -> Optional[Course]:
        raise NotImplementedError

    def update_course(self, course_id: str, payload: dict) -> Optional[Course]:
        raise NotImplementedError

    def delete_course(self, course_id: str) -> None:
        raise NotImplementedError

    def update_instructor_ids(self, *, instructor_name: str, instructor_id: str) -> None:
        """Ask the API to stamp ``instructor_id`` on courses still keyed by name."""

        raise NotImplementedError
