"""Tests for the per-request session context dependencies."""

from __future__ import annotations

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from cta_market.domain.session import SessionContext
from cta_market.entrypoints.http.exception_handlers import register_exception_handlers
from cta_market.entrypoints.http.session import (
    get_session_context,
    require_admin,
    require_buyer,
    require_dealership,
)


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)

    def _echo(context: SessionContext) -> dict[str, str]:
        return {"user_id": context.user_id, "role": context.role.value}

    @app.get("/whoami")
    def whoami(context: SessionContext = Depends(get_session_context)) -> dict[str, str]:
        return _echo(context)

    @app.get("/admin")
    def admin(context: SessionContext = Depends(require_admin)) -> dict[str, str]:
        return _echo(context)

    @app.get("/dealership")
    def dealership(context: SessionContext = Depends(require_dealership)) -> dict[str, str]:
        return _echo(context)

    @app.get("/buyer")
    def buyer(context: SessionContext = Depends(require_buyer)) -> dict[str, str]:
        return _echo(context)

    return TestClient(app, raise_server_exceptions=False)


def _headers(user_id: str | None, role: str | None) -> dict[str, str]:
    headers = {}
    if user_id is not None:
        headers["X-User-Id"] = user_id
    if role is not None:
        headers["X-User-Role"] = role
    return headers


# ==============================================================================
# get_session_context
# ==============================================================================


def test_session_from_headers(client: TestClient) -> None:
    response = client.get("/whoami", headers=_headers("u-1", "BUYER"))

    assert response.status_code == 200
    assert response.json() == {"user_id": "u-1", "role": "BUYER"}


def test_role_is_case_insensitive(client: TestClient) -> None:
    response = client.get("/whoami", headers=_headers(" u-1 ", "dealership"))

    assert response.json() == {"user_id": "u-1", "role": "DEALERSHIP"}


@pytest.mark.parametrize(
    "user_id, role, detail",
    [
        (None, "BUYER", "Missing X-User-Id header"),
        ("   ", "BUYER", "Missing X-User-Id header"),
        ("u-1", None, "Missing X-User-Role header"),
        ("u-1", "SUPERUSER", "Unknown user role"),
    ],
)
def test_missing_or_invalid_session_is_unauthorized(
    client: TestClient, user_id: str | None, role: str | None, detail: str
) -> None:
    response = client.get("/whoami", headers=_headers(user_id, role))

    assert response.status_code == 401
    assert response.json() == {"detail": detail, "code": "UNAUTHORIZED"}


# ==============================================================================
# Role requirements
# ==============================================================================


@pytest.mark.parametrize(
    "path, role, expected",
    [
        ("/admin", "ADMINISTRATOR", 200),
        ("/admin", "DEALERSHIP", 403),
        ("/admin", "BUYER", 403),
        ("/dealership", "DEALERSHIP", 200),
        ("/dealership", "ADMINISTRATOR", 200),
        ("/dealership", "BUYER", 403),
        ("/buyer", "BUYER", 200),
        ("/buyer", "ADMINISTRATOR", 200),
        ("/buyer", "DEALERSHIP", 403),
    ],
)
def test_role_requirements(client: TestClient, path: str, role: str, expected: int) -> None:
    response = client.get(path, headers=_headers("u-1", role))

    assert response.status_code == expected


def test_forbidden_response_body(client: TestClient) -> None:
    response = client.get("/admin", headers=_headers("u-1", "BUYER"))

    assert response.json() == {
        "detail": "Operation not allowed for this role",
        "code": "FORBIDDEN",
    }


def test_role_check_runs_after_session_check(client: TestClient) -> None:
    response = client.get("/admin")

    assert response.status_code == 401
