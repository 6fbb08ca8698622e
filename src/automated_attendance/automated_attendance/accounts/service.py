from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_non_empty
from ..core.constants import INSTRUCTOR_DEFAULTS, MSG_MISSING_FIELDS, STUDENT_DEFAULTS
from ..core.enums import Role
from ..core.exceptions import ServerError, ValidationError
from .repository import AccountRepository

logger = logging.getLogger(__name__)


class AccountService:
    """Use case: manage instructor/student accounts (admin Users screen)."""

    def __init__(self, accounts: AccountRepository):
        self._accounts = accounts

    @staticmethod
    def _remote_role(role: Role) -> Role:
        if role == Role.ADMIN:
            raise ValidationError("Admin accounts cannot be managed from this screen")
        return role

    def list_accounts(self, query: Optional[str] = None) -> list[dict]:
        """Students first, then instructors, shaped for the accounts table.

        ``query`` keeps rows whose id number, name or type contains it
        (case-insensitive); blank means no filter.
        """
        needle = (query or "").strip().lower()
        rows: list[dict] = []
        for role in (Role.STUDENT, Role.INSTRUCTOR):
            for acc in self._accounts.list_accounts(role):
                rows.append(
                    {
                        "_id": acc.account_id,
                        "idNumber": acc.id_number,
                        "fullName": acc.full_name,
                        "name": acc.full_name,
                        "type": role.label,
                    }
                )
        if needle:
            rows = [r for r in rows if any(needle in r[k].lower() for k in ("idNumber", "name", "type"))]
        return rows

    def create_account(self, *, role: Role, id_number: str, full_name: str, password: str) -> None:
        if not (id_number or "").strip() or not (full_name or "").strip() or not password:
            raise ValidationError(MSG_MISSING_FIELDS)
        role = self._remote_role(role)

        extra = dict(STUDENT_DEFAULTS) if role == Role.STUDENT else dict(INSTRUCTOR_DEFAULTS)
        self._accounts.create_account(
            role,
            id_number=id_number.strip(),
            full_name=full_name.strip(),
            password=password,
            extra=extra,
        )
        logger.info("Created %s account %s", role.value, id_number.strip())

    def update_account(self, *, role: Role, account_id: str, id_number: str, full_name: str) -> None:
        role = self._remote_role(role)
        id_number = require_non_empty(id_number, "ID Number")
        full_name = require_non_empty(full_name, "Full Name")
        try:
            self._accounts.update_account(role, account_id, id_number=id_number, full_name=full_name)
        except ServerError as e:
            raise ServerError(
                f"Failed to update account: {e.server_message or 'Unknown error'}", e.status_code
            ) from e

    def delete_account(self, *, role: Role, account_id: str) -> None:
        role = self._remote_role(role)
        self._accounts.delete_account(role, account_id)
        logger.info("Deleted %s account %s", role.value, account_id)
