from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Optional

from ..core.constants import MSG_SAVE_COURSE_FAILED, MSG_SAVE_IN_PROGRESS
from ..core.enums import Weekday
from ..core.exceptions import ServerError, ValidationError
from .model import Course, CourseForm, InstructorRef, SaveResult, ScheduleEntry
from .normalizer import build_payload, default_schedule, form_from_course
from .service import CourseService

_TEXT_FIELDS = {
    "courseCode": "course_code",
    "courseName": "course_name",
    "room": "room",
    "program": "program",
    "yearSection": "year_section",
}
_SCHEDULE_FIELDS = {"day": "day", "startTime": "start_time", "endTime": "end_time"}


class CourseEditor:
    """Form state for one create/edit session of a course.

    At most one save is outstanding per editor: while one runs, ``submit``
    and ``submit_posted`` are refused. On a failed save the form is kept
    as-is so the user can retry.
    """

    def __init__(self, service: CourseService, *, course_id: Optional[str] = None):
        self._service = service
        self.form = CourseForm(schedules=[default_schedule()])
        self.course_id = course_id
        self._in_flight = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._in_flight.locked()

    @contextmanager
    def _claim(self):
        if not self._in_flight.acquire(blocking=False):
            raise ValidationError(MSG_SAVE_IN_PROGRESS)
        try:
            yield
        finally:
            self._in_flight.release()

    def open_new(self) -> None:
        self.form = CourseForm(schedules=[default_schedule()])
        self.course_id = None

    def open_existing(self, course: Course) -> None:
        self.form = form_from_course(course)
        self.course_id = course.course_id

    def load(self, values: dict) -> None:
        """Apply a posted form (API field names) on top of the current state."""
        for key, value in values.items():
            if key == "instructor":
                self.set_instructor(value)
            elif key == "schedules":
                if not isinstance(value, list):
                    raise ValidationError("Schedules must be a list")
                self.form.schedules = [ScheduleEntry.from_dict(s) for s in value if isinstance(s, dict)]
            elif key in _TEXT_FIELDS:
                self.set_field(key, value)

    def set_field(self, key: str, value: Any) -> None:
        if key not in _TEXT_FIELDS:
            raise ValidationError(f"Unknown course field: {key}")
        setattr(self.form, _TEXT_FIELDS[key], "" if value is None else str(value))

    def set_instructor(self, value: Any) -> None:
        self.form.instructor = InstructorRef.from_form_value(value)

    def add_schedule(self) -> None:
        self.form.schedules.append(default_schedule())

    def remove_schedule(self, index: int) -> None:
        del self.form.schedules[index]

    def update_schedule(self, index: int, key: str, value: str) -> None:
        if key not in _SCHEDULE_FIELDS:
            raise ValidationError(f"Unknown schedule field: {key}")
        if key == "day":
            try:
                value = Weekday(value).value
            except ValueError:
                raise ValidationError(f"Invalid day: {value}")
        self.form.schedules[index] = replace(self.form.schedules[index], **{_SCHEDULE_FIELDS[key]: value})

    def submit(self) -> SaveResult:
        with self._claim():
            return self._save()

    def submit_posted(self, values: dict, *, course: Optional[Course] = None) -> SaveResult:
        """Save a posted form in one step.

        The form starts from ``course`` when updating (fields the post leaves
        out keep their stored values) or from a blank form when creating.
        """
        with self._claim():
            if course is None:
                self.open_new()
            else:
                self.open_existing(course)
            self.load(values)
            return self._save()

    def _save(self) -> SaveResult:
        payload = build_payload(self.form)
        try:
            saved = self._service.save(payload, course_id=self.course_id)
        except ServerError as e:
            raise ServerError(e.server_message or MSG_SAVE_COURSE_FAILED, e.status_code) from e

        message = "Course updated successfully" if self.course_id else "Course created successfully"
        saved_id = saved.course_id if saved else self.course_id
        self.open_new()
        return SaveResult(message=message, courses=tuple(self._service.list_courses()), course_id=saved_id)


class CourseEditors:
    """One editor per client, so a client never has two course saves in flight."""

    def __init__(self, service: CourseService):
        self._service = service
        self._editors: dict[str, CourseEditor] = {}
        self._lock = threading.Lock()

    def for_client(self, client_id: str) -> CourseEditor:
        with self._lock:
            editor = self._editors.get(client_id)
            if editor is None:
                editor = self._editors[client_id] = CourseEditor(self._service)
            return editor

    def discard(self, client_id: str) -> None:
        with self._lock:
            self._editors.pop(client_id, None)
