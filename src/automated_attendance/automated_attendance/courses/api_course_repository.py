from __future__ import annotations

from typing import Any, Optional, Sequence

from ..api.client import ApiClient
from .model import Course
from .repository import CourseRepository


def _as_course(body: Any) -> Optional[Course]:
    if isinstance(body, dict) and isinstance(body.get("course"), dict):
        body = body["course"]
    if isinstance(body, dict) and body.get("_id"):
        return Course.from_api(body)
    return None


class ApiCourseRepository(CourseRepository):
    def __init__(self, api: ApiClient):
        self._api = api

    def list_courses(self) -> Sequence[Course]:
        body = self._api.get("/api/courses")
        if not isinstance(body, list):
            return []
        return [Course.from_api(r) for r in body if isinstance(r, dict)]

    def create_course(self, payload: dict) -> Optional[Course]:
        return _as_course(self._api.post("/api/courses", payload))

    def update_course(self, course_id: str, payload: dict) -> Optional[Course]:
        return _as_course(self._api.put(f"/api/courses/{course_id}", payload))

    def delete_course(self, course_id: str) -> None:
        self._api.delete(f"/api/courses/{course_id}")

    def update_instructor_ids(self, *, instructor_name: str, instructor_id: str) -> None:
        self._api.post(
            "/api/courses/update-instructor-ids",
            {"instructorName": instructor_name, "instructorId": instructor_id},
        )
