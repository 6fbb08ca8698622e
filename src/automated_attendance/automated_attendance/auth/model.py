from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.enums import Role


@dataclass(frozen=True)
class AdminSession:
    admin_id: str

    role = Role.ADMIN


@dataclass(frozen=True)
class InstructorSession:
    id_number: str
    full_name: str

    role = Role.INSTRUCTOR


@dataclass(frozen=True)
class StudentSession:
    id_number: str
    full_name: str

    role = Role.STUDENT


@dataclass(frozen=True)
class AuthFailure:
    reason: str


UserSession = Union[AdminSession, InstructorSession, StudentSession]
AuthOutcome = Union[AdminSession, InstructorSession, StudentSession, AuthFailure]
