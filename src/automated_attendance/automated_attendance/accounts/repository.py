from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Account, Identity


class AccountRepository(Protocol):
    """Repository interface for instructor/student accounts.

    Note (DIP): services depend on this interface, not on the REST transport.
    """

    def list_accounts(self, role: Role) -> Sequence[Account]:
        raise NotImplementedError

    def create_account(self, role: Role, *, id_number: str, full_name: str, password: str, extra: dict) -> None:
        raise NotImplementedError

    def update_account(self, role: Role, account_id: str, *, id_number: str, full_name: str) -> None:
        raise NotImplementedError

    def delete_account(self, role: Role, account_id: str) -> None:
        raise NotImplementedError

    def verify_login(self, role: Role, identifier: str, secret: str, *, timeout: Optional[float] = None) -> Optional[Identity]:
        """Return the identity on an affirmative answer, ``None`` on a negative one.

        Transport and non-2xx failures propagate as exceptions.
        """

        raise NotImplementedError

    def logout(self, role: Role, identifier: str) -> None:
        raise NotImplementedError
