from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..core.exceptions import (
    MalformedResponse,
    ServerError,
    ServerUnreachable,
    TransportError,
    TransportTimeout,
)

logger = logging.getLogger(__name__)


class ApiClient:
    """JSON-over-HTTP client for the attendance REST API.

    Admin-privileged calls carry the static ``admin-id`` / ``admin-password``
    header pair the API expects. Transport failures and non-2xx answers are
    translated into the ``core.exceptions`` taxonomy so callers never handle
    ``requests`` exceptions directly.
    """

    def __init__(
        self,
        base_url: str,
        *,
        admin_id: str,
        admin_password: str,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._admin_id = admin_id
        self._admin_password = admin_password
        self._session = session or requests.Session()

    def _headers(self, admin: bool) -> dict:
        headers = {"Content-Type": "application/json"}
        if admin:
            headers["admin-id"] = self._admin_id
            headers["admin-password"] = self._admin_password
        return headers

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        json: Any = None,
        admin: bool = True,
        timeout: Optional[float] = None,
    ) -> Any:
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        try:
            response = self._session.request(
                method,
                url,
                headers=self._headers(admin),
                json=json,
                timeout=timeout,
            )
        except requests.exceptions.Timeout as e:
            # ConnectTimeout is also a ConnectionError; timeout wins.
            logger.warning("%s %s timed out", method, url)
            raise TransportTimeout(str(e)) from e
        except requests.exceptions.ConnectionError as e:
            logger.warning("%s %s unreachable: %s", method, url, e)
            raise ServerUnreachable(str(e)) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(str(e)) from e

        body = None
        if response.content:
            try:
                body = response.json()
            except ValueError as e:
                if response.ok:
                    raise MalformedResponse(f"Invalid response from server ({url})") from e

        if not response.ok:
            message = body.get("message") if isinstance(body, dict) else None
            logger.info("%s %s -> %s %s", method, url, response.status_code, message or "")
            raise ServerError(message, response.status_code)

        return body

    def get(self, endpoint: str, **kwargs) -> Any:
        return self.request("GET", endpoint, **kwargs)

    def post(self, endpoint: str, data: Any = None, **kwargs) -> Any:
        return self.request("POST", endpoint, json=data, **kwargs)

    def put(self, endpoint: str, data: Any = None, **kwargs) -> Any:
        return self.request("PUT", endpoint, json=data, **kwargs)

    def delete(self, endpoint: str, **kwargs) -> Any:
        return self.request("DELETE", endpoint, **kwargs)
