from __future__ import annotations

from typing import Optional, Sequence

from ..api.client import ApiClient
from ..common.datetime_utils import parse_timestamp
from ..core.enums import Role
from ..core.exceptions import MalformedResponse
from .model import Account, Identity
from .repository import AccountRepository


class ApiAccountRepository(AccountRepository):
    def __init__(self, api: ApiClient):
        self._api = api

    def list_accounts(self, role: Role) -> Sequence[Account]:
        body = self._api.get(f"/api/{role.collection}")
        if not isinstance(body, list):
            return []
        return [
            Account(
                account_id=str(r.get("_id", "")),
                id_number=str(r.get("idNumber", "")),
                full_name=r.get("fullName") or "",
                role=role,
                created_at=parse_timestamp(r.get("createdAt")),
            )
            for r in body
            if isinstance(r, dict)
        ]

    def create_account(self, role: Role, *, id_number: str, full_name: str, password: str, extra: dict) -> None:
        self._api.post(
            f"/api/{role.collection}",
            {"idNumber": id_number, "fullName": full_name, "password": password, **extra},
        )

    def update_account(self, role: Role, account_id: str, *, id_number: str, full_name: str) -> None:
        self._api.put(f"/api/{role.collection}/{account_id}", {"idNumber": id_number, "fullName": full_name})

    def delete_account(self, role: Role, account_id: str) -> None:
        self._api.delete(f"/api/{role.collection}/{account_id}")

    def verify_login(self, role: Role, identifier: str, secret: str, *, timeout: Optional[float] = None) -> Optional[Identity]:
        body = self._api.post(
            f"/api/{role.collection}/login",
            {f"{role.value}Id": identifier, "password": secret},
            admin=False,
            timeout=timeout,
        )
        if not isinstance(body, dict) or not body.get("success"):
            return None

        data = body.get(role.value)
        if not isinstance(data, dict) or not data.get("idNumber"):
            raise MalformedResponse(f"{role.label} login response has no {role.value} record")
        return Identity(id_number=str(data["idNumber"]), full_name=data.get("fullName") or "")

    def logout(self, role: Role, identifier: str) -> None:
        self._api.post(f"/api/{role.collection}/logout", {f"{role.value}Id": identifier}, admin=False)
