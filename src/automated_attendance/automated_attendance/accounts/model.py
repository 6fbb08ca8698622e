from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Account:
    """Instructor or student record as listed by the REST API.

    The secret is never part of this object; it is only ever sent to the server.
    """

    account_id: str
    id_number: str
    full_name: str
    role: Role
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Identity:
    """What a successful remote login hands back."""

    id_number: str
    full_name: str
