from __future__ import annotations

import logging
from typing import Optional

from ..accounts.repository import AccountRepository
from ..core.enums import Role
from ..core.exceptions import ServerError, TransportError
from .mirror import SessionMirror

logger = logging.getLogger(__name__)


class LogoutService:
    """Use case: end an instructor/student session (admin sessions are local only)."""

    def __init__(self, accounts: AccountRepository, mirror: SessionMirror):
        self._accounts = accounts
        self._mirror = mirror

    def logout(self, role: Role, *, mirror: Optional[SessionMirror] = None) -> None:
        if role == Role.ADMIN:
            return

        mirror = mirror or self._mirror
        identifier = mirror.stored_id(role)
        if identifier:
            try:
                self._accounts.logout(role, identifier)
            except (ServerError, TransportError) as e:
                logger.warning("Remote logout for %s %s failed: %s", role.value, identifier, e)

        mirror.clear(role)
