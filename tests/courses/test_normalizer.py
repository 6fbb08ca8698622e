from __future__ import annotations

import pytest

from src.automated_attendance.automated_attendance.common.datetime_utils import to_twelve_hour
from src.automated_attendance.automated_attendance.common.validators import is_twelve_hour_time
from src.automated_attendance.automated_attendance.core.constants import MSG_BAD_SCHEDULE_DAY, MSG_BAD_SCHEDULE_TIME
from src.automated_attendance.automated_attendance.core.exceptions import ValidationError
from src.automated_attendance.automated_attendance.courses.model import (
    Course,
    CourseForm,
    InstructorRef,
    ScheduleEntry,
)
from src.automated_attendance.automated_attendance.courses.normalizer import (
    build_payload,
    default_schedule,
    form_from_course,
    validate_schedules,
)


@pytest.mark.parametrize("value", ["8:00 AM", "08:00 AM", "12:59PM", "1:05 pm", "11:30 Am", "9:00am"])
def test_twelve_hour_pattern_accepts(value):
    assert is_twelve_hour_time(value)


@pytest.mark.parametrize(
    "value",
    ["13:00 PM", "8:00 AM\n", "0:30 AM", "00:30 AM", "8:60 AM", "8:5 AM", "8:00", "14:00", "8:00  AM", " 8:00 AM", "", None],
)
def test_twelve_hour_pattern_rejects(value):
    assert not is_twelve_hour_time(value)


@pytest.mark.parametrize(
    "stored, shown",
    [
        ("13:05", "1:05 PM"),
        ("14:00", "2:00 PM"),
        ("12:00", "12:00 PM"),
        ("08:30", "8:30 AM"),
        ("9:07", "9:07 AM"),
        ("23:59", "11:59 PM"),
    ],
)
def test_to_twelve_hour_converts_24_hour_values(stored, shown):
    assert to_twelve_hour(stored) == shown


@pytest.mark.parametrize("value", ["8:00 AM", "1:05 PM", ""])
def test_to_twelve_hour_leaves_tagged_and_empty_values(value):
    assert to_twelve_hour(value) == value
    assert to_twelve_hour(to_twelve_hour(value)) == value


def test_to_twelve_hour_is_idempotent_after_conversion():
    once = to_twelve_hour("17:45")
    assert to_twelve_hour(once) == once == "5:45 PM"


def test_hour_zero_is_flagged_not_guessed():
    with pytest.raises(ValidationError):
        to_twelve_hour("00:30")


def test_loading_course_converts_times_for_editor():
    course = Course(
        course_id="c1",
        course_code="CS101",
        course_name="Intro",
        instructor="I-100",
        schedules=(ScheduleEntry(day="Tuesday", start_time="14:00", end_time="3:30 PM"),),
    )

    form = form_from_course(course)

    assert form.schedules == [ScheduleEntry(day="Tuesday", start_time="2:00 PM", end_time="3:30 PM")]
    assert form.instructor == InstructorRef.raw("I-100")


def test_loading_course_without_schedules_gives_default_entry():
    course = Course(course_id="c1", course_code="CS101", course_name="Intro", instructor="I-100")

    assert form_from_course(course).schedules == [default_schedule()]


def test_default_schedule_values():
    assert default_schedule().to_dict() == {"day": "Monday", "startTime": "8:00 AM", "endTime": "9:30 AM"}


def test_payload_sends_only_selected_instructor_id():
    form = CourseForm(
        course_code="CS101",
        course_name="Intro to Computing",
        instructor=InstructorRef.from_form_value({"name": "Jane Doe", "idNumber": "I-100"}),
        schedules=[ScheduleEntry(day="Monday", start_time="8:00 AM", end_time="9:30 AM")],
    )

    payload = build_payload(form)

    assert payload["instructor"] == "I-100"
    assert payload["courseCode"] == "CS101"
    assert payload["schedules"] == [{"day": "Monday", "startTime": "8:00 AM", "endTime": "9:30 AM"}]


def test_raw_instructor_string_is_used_as_id():
    ref = InstructorRef.from_form_value("I-200")

    assert ref.id_number == ref.name == "I-200"
    assert not ref.selected


def test_missing_required_fields_block_payload():
    form = CourseForm(course_code="  ", course_name="Intro", instructor=InstructorRef.raw("I-1"))

    with pytest.raises(ValidationError, match="Course Code"):
        build_payload(form)


def test_one_bad_time_rejects_all_schedules():
    schedules = [
        ScheduleEntry(day="Monday", start_time="8:00 AM", end_time="9:30 AM"),
        ScheduleEntry(day="Wednesday", start_time="14:00", end_time="3:00 PM"),
        ScheduleEntry(day="Friday", start_time="1:00 PM", end_time="2:00 PM"),
    ]

    with pytest.raises(ValidationError, match="HH:MM AM/PM") as exc:
        validate_schedules(schedules)
    assert str(exc.value) == MSG_BAD_SCHEDULE_TIME


@pytest.mark.parametrize("day", ["Funday", "", "monday"])
def test_unknown_day_rejects_all_schedules(day):
    schedules = [
        ScheduleEntry(day="Monday", start_time="8:00 AM", end_time="9:30 AM"),
        ScheduleEntry(day=day, start_time="1:00 PM", end_time="2:00 PM"),
    ]

    with pytest.raises(ValidationError) as exc:
        validate_schedules(schedules)
    assert str(exc.value) == MSG_BAD_SCHEDULE_DAY


def test_payload_is_not_built_for_unknown_day():
    form = CourseForm(
        course_code="CS101",
        course_name="Intro",
        instructor=InstructorRef.raw("I-1"),
        schedules=[ScheduleEntry(day="Funday", start_time="8:00 AM", end_time="9:30 AM")],
    )

    with pytest.raises(ValidationError, match="valid day"):
        build_payload(form)
