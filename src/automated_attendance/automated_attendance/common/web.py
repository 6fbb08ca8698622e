from __future__ import annotations

import logging
import uuid
from functools import wraps

from flask import current_app, jsonify, session

from ..core.constants import MSG_CONNECTION_TIMEOUT, MSG_SERVER_UNREACHABLE
from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ServerError,
    TransportError,
    TransportTimeout,
    ValidationError,
)

logger = logging.getLogger(__name__)


def fail(message: str, status: int):
    return jsonify({"ok": False, "message": message}), status


def error_response(e: Exception, *, action: str):
    """Turn any failure into a single user-facing message. Nothing is fatal."""
    if isinstance(e, ValidationError):
        return fail(str(e), 400)
    if isinstance(e, AuthenticationError):
        return fail(str(e), 401)
    if isinstance(e, AuthorizationError):
        return fail(str(e), 403)
    if isinstance(e, ServerError):
        return fail(str(e), e.status_code if 400 <= e.status_code < 500 else 502)
    if isinstance(e, TransportTimeout):
        return fail(MSG_CONNECTION_TIMEOUT, 504)
    if isinstance(e, TransportError):
        return fail(MSG_SERVER_UNREACHABLE, 502)

    logger.exception("Unexpected error while trying to %s", action)
    if bool(current_app.config.get("DEBUG", False)):
        return fail(f"System error while trying to {action}: {e}", 500)
    return fail(f"System error while trying to {action}", 500)


def client_id() -> str:
    """Opaque id of the calling client, kept in its Flask session."""
    if "client_id" not in session:
        session["client_id"] = uuid.uuid4().hex
    return session["client_id"]


def require_admin() -> None:
    if "role" not in session:
        raise AuthenticationError("Please log in to continue")
    if session.get("role") != Role.ADMIN.value:
        raise AuthorizationError("You do not have permission")


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            require_admin()
        except (AuthenticationError, AuthorizationError) as e:
            return error_response(e, action="open this page")
        return view(*args, **kwargs)

    return wrapper


def parse_role(value) -> Role:
    try:
        role = Role(str(value or "").strip().lower())
    except ValueError:
        raise ValidationError("Account type is not valid")
    if role == Role.ADMIN:
        raise ValidationError("Account type is not valid")
    return role
