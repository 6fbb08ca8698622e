from __future__ import annotations

from typing import Optional, Union

from ..auth.model import InstructorSession, StudentSession
from ..core.constants import (
    KEY_INSTRUCTOR_ID,
    KEY_INSTRUCTOR_NAME,
    KEY_STUDENT_ID,
    KEY_STUDENT_NAME,
    KEY_USER_TYPE,
)
from ..core.enums import Role
from .store import KeyValueStore, ScopedKeyValueStore

_KEYS = {
    Role.INSTRUCTOR: (KEY_INSTRUCTOR_ID, KEY_INSTRUCTOR_NAME),
    Role.STUDENT: (KEY_STUDENT_ID, KEY_STUDENT_NAME),
}


class SessionMirror:
    """Durable copy of the logged-in identity, used to survive restarts.

    Keys are written one by one. A crash between writes can leave a partial
    mirror; ``restore`` treats any missing key as "logged out".
    """

    def __init__(self, store: KeyValueStore):
        self._store = store

    def for_client(self, client_id: str) -> "SessionMirror":
        """Mirror kept apart from every other client sharing the same store."""
        return SessionMirror(ScopedKeyValueStore(self._store, client_id))

    def save(self, session: Union[InstructorSession, StudentSession]) -> None:
        id_key, name_key = _KEYS[session.role]
        self._store.set(id_key, session.id_number)
        self._store.set(name_key, session.full_name)
        self._store.set(KEY_USER_TYPE, session.role.value)

    def stored_id(self, role: Role) -> Optional[str]:
        if role not in _KEYS:
            return None
        return self._store.get(_KEYS[role][0])

    def restore(self) -> Optional[Union[InstructorSession, StudentSession]]:
        user_type = self._store.get(KEY_USER_TYPE)
        try:
            role = Role(user_type)
        except ValueError:
            return None
        if role not in _KEYS:
            return None

        id_key, name_key = _KEYS[role]
        id_number = self._store.get(id_key)
        full_name = self._store.get(name_key)
        if not id_number or full_name is None:
            return None

        if role == Role.INSTRUCTOR:
            return InstructorSession(id_number=id_number, full_name=full_name)
        return StudentSession(id_number=id_number, full_name=full_name)

    def clear(self, role: Role) -> None:
        for key in _KEYS.get(role, ()):
            self._store.remove(key)
        self._store.remove(KEY_USER_TYPE)
