from __future__ import annotations

import logging
from typing import Optional

from ..accounts.repository import AccountRepository
from ..core.constants import (
    DEFAULT_LOGIN_TIMEOUT_SECONDS,
    MSG_CONNECTION_TIMEOUT,
    MSG_INVALID_CREDENTIALS,
    MSG_MISSING_CREDENTIALS,
    MSG_SERVER_UNREACHABLE,
)
from ..core.enums import Role
from ..core.exceptions import ServerError, TransportError, TransportTimeout
from ..session.mirror import SessionMirror
from .model import AdminSession, AuthFailure, AuthOutcome, InstructorSession, StudentSession

logger = logging.getLogger(__name__)


class AuthResolver:
    """Use case: map submitted credentials onto exactly one account class.

    Precedence is fixed and short-circuiting:

    1. static admin pair (local comparison, no network call);
    2. instructor login endpoint;
    3. student login endpoint.

    The remote attempts run one after the other. When both fail, only the
    student attempt decides the message, so a failure never reveals which
    identifier namespace the caller belongs to.
    """

    def __init__(
        self,
        accounts: AccountRepository,
        mirror: SessionMirror,
        *,
        admin_id: str,
        admin_password: str,
        timeout: float = DEFAULT_LOGIN_TIMEOUT_SECONDS,
    ):
        self._accounts = accounts
        self._mirror = mirror
        self._admin_id = admin_id
        self._admin_password = admin_password
        self._timeout = timeout

    def resolve(self, identifier: str, secret: str, *, mirror: Optional[SessionMirror] = None) -> AuthOutcome:
        """Resolve credentials; remote sessions are written to ``mirror`` (default: the shared one)."""
        mirror = mirror or self._mirror
        if not (identifier or "").strip() or not (secret or "").strip():
            return AuthFailure(MSG_MISSING_CREDENTIALS)

        if identifier == self._admin_id and secret == self._admin_password:
            logger.info("Admin login for %s", identifier)
            return AdminSession(admin_id=identifier)

        identifier = identifier.strip()
        secret = secret.strip()

        identity, _ = self._attempt(Role.INSTRUCTOR, identifier, secret)
        if identity:
            session = InstructorSession(id_number=identity.id_number, full_name=identity.full_name)
            mirror.save(session)
            return session

        identity, error = self._attempt(Role.STUDENT, identifier, secret)
        if identity:
            session = StudentSession(id_number=identity.id_number, full_name=identity.full_name)
            mirror.save(session)
            return session

        return AuthFailure(self._failure_message(error))

    def _attempt(self, role: Role, identifier: str, secret: str):
        logger.info("Attempting %s login for %s", role.value, identifier)
        try:
            identity = self._accounts.verify_login(role, identifier, secret, timeout=self._timeout)
        except (ServerError, TransportError) as e:
            logger.info("%s login for %s failed: %s", role.label, identifier, type(e).__name__)
            return None, e
        if identity is None:
            logger.info("%s login for %s rejected", role.label, identifier)
        return identity, None

    @staticmethod
    def _failure_message(error: Optional[Exception]) -> str:
        if isinstance(error, TransportTimeout):
            return MSG_CONNECTION_TIMEOUT
        if isinstance(error, TransportError):
            return MSG_SERVER_UNREACHABLE
        return MSG_INVALID_CREDENTIALS
