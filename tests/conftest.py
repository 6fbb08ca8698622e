from __future__ import annotations

import json
from datetime import date

import pytest

BASE_URL = "http://api.test"


class FakeResponse:
    def __init__(self, status_code: int = 200, body=None, raw: bytes | None = None):
        self.status_code = status_code
        if raw is not None:
            self.content = raw
        else:
            self.content = b"" if body is None else json.dumps(body).encode("utf-8")

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        return json.loads(self.content)


class FakeHttp:
    """Stands in for ``requests.Session``; routes are keyed by (method, path).

    A route is ``(status, body)``, an exception to raise, or a callable that
    gets the recorded call and returns ``(status, body)``.
    """

    def __init__(self, routes: dict):
        self.routes = routes
        self.calls: list[dict] = []

    def request(self, method, url, headers=None, json=None, timeout=None):
        path = url[len(BASE_URL):]
        self.calls.append({"method": method, "path": path, "headers": headers, "json": json, "timeout": timeout})

        route = self.routes.get((method, path))
        if isinstance(route, Exception):
            raise route
        if route is None:
            return FakeResponse(404, {"message": "Not found"})
        if callable(route):
            route = route(self.calls[-1])
        status, body = route
        return FakeResponse(status, body)


@pytest.fixture
def make_http():
    return FakeHttp


@pytest.fixture
def api_config():
    return {
        "base_url": BASE_URL,
        "admin_id": "admin",
        "admin_password": "admin123",
        "login_timeout": 8,
    }


@pytest.fixture
def fixed_today():
    return date(2026, 3, 14)
