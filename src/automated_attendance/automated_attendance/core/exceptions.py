from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid. Never reaches the network layer."""


class AuthenticationError(DomainError):
    """Raised when a protected action is attempted without a logged-in session."""


class AuthorizationError(DomainError):
    """Raised when a session lacks permission for an action."""


class TransportError(DomainError):
    """Raised when the REST API could not be talked to at all."""


class TransportTimeout(TransportError):
    """The request did not complete within its timeout."""


class ServerUnreachable(TransportError):
    """Connection refused, DNS failure and similar."""


class MalformedResponse(TransportError):
    """The server answered with something that is not the expected JSON."""


class ServerError(DomainError):
    """Raised for non-2xx responses; carries the server message when present."""

    def __init__(self, message: Optional[str], status_code: int):
        self.server_message = message
        self.status_code = status_code
        super().__init__(message or f"Request failed with status {status_code}")
