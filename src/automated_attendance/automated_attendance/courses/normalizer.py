"""Conversion between stored course records and the course editor form.

Load direction: stored 24-hour times are shown in 12-hour form.
Save direction: every schedule time must already be in 12-hour form and every
day must be a weekday name; a single bad value blocks the whole save before
anything is sent.
"""

from __future__ import annotations

from typing import Iterable

from ..common.datetime_utils import to_twelve_hour
from ..common.validators import is_twelve_hour_time
from ..core.constants import DEFAULT_SCHEDULE, MSG_BAD_SCHEDULE_DAY, MSG_BAD_SCHEDULE_TIME
from ..core.enums import Weekday
from ..core.exceptions import ValidationError
from .model import Course, CourseForm, InstructorRef, ScheduleEntry

_WEEKDAYS = frozenset(d.value for d in Weekday)


def default_schedule() -> ScheduleEntry:
    return ScheduleEntry.from_dict(DEFAULT_SCHEDULE)


def schedule_for_editor(entry: ScheduleEntry) -> ScheduleEntry:
    return ScheduleEntry(
        day=entry.day,
        start_time=to_twelve_hour(entry.start_time),
        end_time=to_twelve_hour(entry.end_time),
    )


def form_from_course(course: Course) -> CourseForm:
    schedules = [schedule_for_editor(s) for s in course.schedules] or [default_schedule()]
    return CourseForm(
        course_code=course.course_code,
        course_name=course.course_name,
        instructor=InstructorRef.raw(course.instructor),
        room=course.room,
        program=course.program,
        year_section=course.year_section,
        schedules=schedules,
    )


def validate_schedules(schedules: Iterable[ScheduleEntry]) -> None:
    for s in schedules:
        if not is_twelve_hour_time(s.start_time) or not is_twelve_hour_time(s.end_time):
            raise ValidationError(MSG_BAD_SCHEDULE_TIME)
        if s.day not in _WEEKDAYS:
            raise ValidationError(MSG_BAD_SCHEDULE_DAY)


def build_payload(form: CourseForm) -> dict:
    """Canonical create/update body. Only the instructor identifier is sent."""
    missing = [
        label
        for label, value in (
            ("Instructor", form.instructor.id_number),
            ("Course Code", form.course_code),
            ("Course Name", form.course_name),
        )
        if not (value or "").strip()
    ]
    if missing:
        raise ValidationError(f"{', '.join(missing)} is required")

    validate_schedules(form.schedules)

    return {
        "courseCode": form.course_code,
        "courseName": form.course_name,
        "instructor": form.instructor.id_number,
        "room": form.room,
        "program": form.program,
        "yearSection": form.year_section,
        "schedules": [s.to_dict() for s in form.schedules],
    }
