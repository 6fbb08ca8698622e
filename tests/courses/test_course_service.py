from __future__ import annotations

from src.automated_attendance.automated_attendance.accounts.model import Account
from src.automated_attendance.automated_attendance.core.enums import Role
from src.automated_attendance.automated_attendance.core.exceptions import ServerError, ServerUnreachable
from src.automated_attendance.automated_attendance.courses.service import CourseService


class FakeAccounts:
    def __init__(self, instructors):
        self.instructors = instructors
        self.list_calls = 0

    def list_accounts(self, role):
        assert role == Role.INSTRUCTOR
        self.list_calls += 1
        return self.instructors


class FakeCourses:
    def __init__(self, failing=()):
        self.failing = set(failing)
        self.updated: list[tuple] = []

    def update_instructor_ids(self, *, instructor_name, instructor_id):
        if instructor_id in self.failing:
            raise ServerError("boom", 500)
        self.updated.append((instructor_name, instructor_id))


def instructor(account_id, id_number, name):
    return Account(account_id=account_id, id_number=id_number, full_name=name, role=Role.INSTRUCTOR)


def test_search_needs_two_characters():
    accounts = FakeAccounts([instructor("a1", "I-100", "Jane Doe")])
    svc = CourseService(FakeCourses(), accounts)

    assert svc.search_instructors("J") == []
    assert accounts.list_calls == 0


def test_search_matches_name_case_insensitively_or_id_substring():
    accounts = FakeAccounts(
        [
            instructor("a1", "I-100", "Jane Doe"),
            instructor("a2", "I-200", "John Smith"),
            instructor("a3", "X-100", "Ann Lee"),
        ]
    )
    svc = CourseService(FakeCourses(), accounts)

    assert [o.name for o in svc.search_instructors("jAN")] == ["Jane Doe"]
    assert [o.to_dict() for o in svc.search_instructors("100")] == [
        {"id": "a1", "name": "Jane Doe", "idNumber": "I-100"},
        {"id": "a3", "name": "Ann Lee", "idNumber": "X-100"},
    ]


def test_backfill_continues_past_failures():
    accounts = FakeAccounts([instructor("a1", "I-1", "A"), instructor("a2", "I-2", "B"), instructor("a3", "I-3", "C")])
    courses = FakeCourses(failing={"I-2"})
    svc = CourseService(courses, accounts)

    assert svc.backfill_instructor_ids() == (2, 1)
    assert courses.updated == [("A", "I-1"), ("C", "I-3")]


def test_backfill_counts_transport_failures():
    class Unreachable(FakeCourses):
        def update_instructor_ids(self, *, instructor_name, instructor_id):
            raise ServerUnreachable("down")

    svc = CourseService(Unreachable(), FakeAccounts([instructor("a1", "I-1", "A")]))

    assert svc.backfill_instructor_ids() == (0, 1)
