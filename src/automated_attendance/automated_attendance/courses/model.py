from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class ScheduleEntry:
    day: str
    start_time: str
    end_time: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScheduleEntry":
        return cls(
            day=data.get("day") or "",
            start_time=data.get("startTime") or "",
            end_time=data.get("endTime") or "",
        )

    def to_dict(self) -> dict:
        return {"day": self.day, "startTime": self.start_time, "endTime": self.end_time}


@dataclass(frozen=True)
class InstructorRef:
    """Instructor field of the course form.

    Either a raw string (legacy identifier, or empty) or a selection made in
    the instructor search, which carries both the display name and the id
    number. Form values are turned into this type once, when the form is read.
    """

    id_number: str
    name: str
    selected: bool = False

    @classmethod
    def raw(cls, value: str) -> "InstructorRef":
        value = value or ""
        return cls(id_number=value, name=value, selected=False)

    @classmethod
    def chosen(cls, *, name: str, id_number: str) -> "InstructorRef":
        return cls(id_number=id_number, name=name, selected=True)

    @classmethod
    def from_form_value(cls, value: Any) -> "InstructorRef":
        if isinstance(value, InstructorRef):
            return value
        if value is None:
            return cls.raw("")
        if isinstance(value, str):
            return cls.raw(value)
        if isinstance(value, Mapping):
            return cls.chosen(name=str(value.get("name") or ""), id_number=str(value.get("idNumber") or ""))
        raise ValidationError("Instructor value is not valid")

    def to_form_value(self):
        if self.selected:
            return {"name": self.name, "idNumber": self.id_number}
        return self.id_number


@dataclass(frozen=True)
class Course:
    """Course record as stored by the API."""

    course_id: str
    course_code: str
    course_name: str
    instructor: str
    room: str = ""
    program: str = ""
    year_section: str = ""
    schedules: tuple[ScheduleEntry, ...] = ()

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "Course":
        instructor = data.get("instructor") or ""
        if isinstance(instructor, Mapping):
            # populated reference from the API
            instructor = instructor.get("idNumber") or ""
        return cls(
            course_id=str(data.get("_id", "")),
            course_code=data.get("courseCode") or "",
            course_name=data.get("courseName") or "",
            instructor=str(instructor),
            room=data.get("room") or "",
            program=data.get("program") or "",
            year_section=data.get("yearSection") or "",
            schedules=tuple(ScheduleEntry.from_dict(s) for s in data.get("schedules") or [] if isinstance(s, Mapping)),
        )

    def to_dict(self) -> dict:
        return {
            "_id": self.course_id,
            "courseCode": self.course_code,
            "courseName": self.course_name,
            "instructor": self.instructor,
            "room": self.room,
            "program": self.program,
            "yearSection": self.year_section,
            "schedules": [s.to_dict() for s in self.schedules],
        }


@dataclass
class CourseForm:
    """Editable (denormalized) course; see ``normalizer.build_payload`` for the canonical form."""

    course_code: str = ""
    course_name: str = ""
    instructor: InstructorRef = field(default_factory=lambda: InstructorRef.raw(""))
    room: str = ""
    program: str = ""
    year_section: str = ""
    schedules: list[ScheduleEntry] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "courseCode": self.course_code,
            "courseName": self.course_name,
            "instructor": self.instructor.to_form_value(),
            "room": self.room,
            "program": self.program,
            "yearSection": self.year_section,
            "schedules": [s.to_dict() for s in self.schedules],
        }


@dataclass(frozen=True)
class InstructorOption:
    """One row of the instructor search dropdown."""

    account_id: str
    name: str
    id_number: str

    def to_dict(self) -> dict:
        return {"id": self.account_id, "name": self.name, "idNumber": self.id_number}


@dataclass(frozen=True)
class SaveResult:
    message: str
    courses: tuple[Course, ...]
    course_id: Optional[str] = None
