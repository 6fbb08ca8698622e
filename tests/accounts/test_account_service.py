from __future__ import annotations

import pytest

from src.automated_attendance.automated_attendance.accounts.model import Account
from src.automated_attendance.automated_attendance.accounts.service import AccountService
from src.automated_attendance.automated_attendance.core.enums import Role
from src.automated_attendance.automated_attendance.core.exceptions import ServerError, ValidationError


class InMemoryAccounts:
    def __init__(self):
        self.rows = {
            Role.STUDENT: [Account(account_id="s1", id_number="S-1", full_name="Sam", role=Role.STUDENT)],
            Role.INSTRUCTOR: [Account(account_id="i1", id_number="I-1", full_name="Jane", role=Role.INSTRUCTOR)],
        }
        self.created: list[tuple] = []
        self.deleted: list[tuple] = []
        self.update_error = None

    def list_accounts(self, role):
        return self.rows[role]

    def create_account(self, role, *, id_number, full_name, password, extra):
        self.created.append((role, id_number, full_name, password, extra))

    def update_account(self, role, account_id, *, id_number, full_name):
        if self.update_error:
            raise self.update_error

    def delete_account(self, role, account_id):
        self.deleted.append((role, account_id))


def test_list_puts_students_before_instructors():
    rows = AccountService(InMemoryAccounts()).list_accounts()

    assert [(r["idNumber"], r["type"], r["name"]) for r in rows] == [("S-1", "Student", "Sam"), ("I-1", "Instructor", "Jane")]


def test_create_student_adds_role_defaults():
    repo = InMemoryAccounts()

    AccountService(repo).create_account(role=Role.STUDENT, id_number=" S-2 ", full_name="Ann", password="secret")

    assert repo.created == [(Role.STUDENT, "S-2", "Ann", "secret", {"course": "BSIT", "year": "1", "section": "A"})]


def test_create_instructor_adds_department():
    repo = InMemoryAccounts()

    AccountService(repo).create_account(role=Role.INSTRUCTOR, id_number="I-2", full_name="Bo", password="pw")

    assert repo.created[0][4] == {"department": "IT"}


@pytest.mark.parametrize("id_number, full_name, password", [("", "A", "pw"), ("X", " ", "pw"), ("X", "A", "")])
def test_create_requires_all_fields(id_number, full_name, password):
    repo = InMemoryAccounts()

    with pytest.raises(ValidationError, match="Please fill in all fields"):
        AccountService(repo).create_account(role=Role.STUDENT, id_number=id_number, full_name=full_name, password=password)
    assert repo.created == []


def test_admin_accounts_cannot_be_created():
    with pytest.raises(ValidationError):
        AccountService(InMemoryAccounts()).create_account(role=Role.ADMIN, id_number="a", full_name="a", password="a")


def test_update_failure_is_prefixed():
    repo = InMemoryAccounts()
    repo.update_error = ServerError("ID already taken", 409)

    with pytest.raises(ServerError, match="Failed to update account: ID already taken"):
        AccountService(repo).update_account(role=Role.STUDENT, account_id="s1", id_number="S-9", full_name="Sam")


def test_delete_forwards_role_and_id():
    repo = InMemoryAccounts()

    AccountService(repo).delete_account(role=Role.INSTRUCTOR, account_id="i1")

    assert repo.deleted == [(Role.INSTRUCTOR, "i1")]


@pytest.mark.parametrize(
    "query, expected",
    [
        ("jan", ["I-1"]),
        ("s-1", ["S-1"]),
        ("student", ["S-1"]),
        ("  ", ["S-1", "I-1"]),
        (None, ["S-1", "I-1"]),
        ("nobody", []),
    ],
)
def test_list_filters_by_id_name_or_type(query, expected):
    rows = AccountService(InMemoryAccounts()).list_accounts(query)

    assert [r["idNumber"] for r in rows] == expected
