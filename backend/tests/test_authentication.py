"""Tests for the request authentication state machine."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient

from core import AuthFailure, AuthenticationError, TokenService
from core.config import settings
from core.errors import AUTH_FAILURE_MESSAGES
from services.auth import authenticate, parse_bearer_credential


def _set_credential(client: AsyncClient, value: str) -> None:
    client.cookies.clear()
    client.cookies.set(settings.auth_cookie_name, value)


def _assert_cookie_cleared(response) -> None:
    set_cookie_headers = response.headers.get_list("set-cookie")
    assert any(
        header.startswith(f"{settings.auth_cookie_name}=") and "Max-Age=0" in header
        for header in set_cookie_headers
    ), set_cookie_headers


async def _signup_and_login(client: AsyncClient, nickname: str) -> str:
    await client.post(
        "/api/signup",
        json={"nickname": nickname, "password": "pass1234", "confirm": "pass1234"},
    )
    response = await client.post(
        "/api/login", json={"nickname": nickname, "password": "pass1234"}
    )
    return response.json()["token"]


@pytest.mark.parametrize("raw", [None, ""])
def test_missing_credential(raw):
    with pytest.raises(AuthenticationError) as excinfo:
        parse_bearer_credential(raw)
    assert excinfo.value.reason is AuthFailure.NO_CREDENTIAL


@pytest.mark.parametrize(
    "raw",
    ["Token abc", "bearer abc", "Bearer", "Bearer ", "Bearer a b", "abc"],
)
def test_wrong_scheme(raw: str):
    with pytest.raises(AuthenticationError) as excinfo:
        parse_bearer_credential(raw)
    assert excinfo.value.reason is AuthFailure.BAD_SCHEME


def test_bearer_token_is_extracted():
    assert parse_bearer_credential("Bearer abc.def.ghi") == "abc.def.ghi"


def test_every_failure_has_a_message():
    assert set(AUTH_FAILURE_MESSAGES) == set(AuthFailure)


@pytest.mark.asyncio
async def test_authenticate_resolves_principal(board, token_service: TokenService):
    user = await board.add_user("alice1")

    principal = await authenticate(
        f"Bearer {token_service.issue(user.id)}",
        tokens=token_service,
        users=board.users,
    )

    assert principal is user


@pytest.mark.asyncio
async def test_authenticate_rejects_unknown_principal(board, token_service: TokenService):
    with pytest.raises(AuthenticationError) as excinfo:
        await authenticate(
            f"Bearer {token_service.issue(404)}",
            tokens=token_service,
            users=board.users,
        )
    assert excinfo.value.reason is AuthFailure.UNKNOWN_PRINCIPAL


@pytest.mark.asyncio
async def test_authenticate_rejects_expired_token(board, token_service: TokenService):
    user = await board.add_user("alice1")
    token = token_service.issue(user.id, issued_at=datetime.now(timezone.utc) - timedelta(hours=2))

    with pytest.raises(AuthenticationError) as excinfo:
        await authenticate(f"Bearer {token}", tokens=token_service, users=board.users)
    assert excinfo.value.reason is AuthFailure.EXPIRED


@pytest.mark.asyncio
async def test_protected_route_without_cookie_returns_401(async_client: AsyncClient):
    response = await async_client.post("/api/posts", json={"title": "hi", "content": "world"})

    assert response.status_code == 401
    assert response.json()["detail"] == AUTH_FAILURE_MESSAGES[AuthFailure.NO_CREDENTIAL]
    _assert_cookie_cleared(response)


@pytest.mark.asyncio
async def test_wrong_scheme_cookie_returns_401_and_clears_cookie(
    async_client: AsyncClient, token_service: TokenService
):
    _set_credential(async_client, f"Basic {token_service.issue(1)}")

    response = await async_client.post("/api/posts", json={"title": "hi", "content": "world"})

    assert response.status_code == 401
    assert response.json()["detail"] == AUTH_FAILURE_MESSAGES[AuthFailure.BAD_SCHEME]
    _assert_cookie_cleared(response)


@pytest.mark.asyncio
async def test_expired_cookie_returns_401(async_client: AsyncClient, token_service: TokenService):
    token = await _signup_and_login(async_client, "alice1")
    claims_user_id = token_service.verify(token)
    expired = token_service.issue(
        claims_user_id,
        issued_at=datetime.now(timezone.utc) - timedelta(hours=1, seconds=1),
    )
    _set_credential(async_client, f"Bearer {expired}")

    response = await async_client.post("/api/posts", json={"title": "hi", "content": "world"})

    assert response.status_code == 401
    assert response.json()["detail"] == AUTH_FAILURE_MESSAGES[AuthFailure.EXPIRED]
    _assert_cookie_cleared(response)


@pytest.mark.asyncio
async def test_forged_cookie_returns_401(async_client: AsyncClient):
    forged = TokenService("f" * 48).issue(1)
    _set_credential(async_client, f"Bearer {forged}")

    response = await async_client.post("/api/posts", json={"title": "hi", "content": "world"})

    assert response.status_code == 401
    assert response.json()["detail"] == AUTH_FAILURE_MESSAGES[AuthFailure.MALFORMED]


@pytest.mark.asyncio
async def test_token_for_deleted_user_returns_401_and_clears_cookie(
    async_client: AsyncClient, token_service: TokenService
):
    _set_credential(async_client, f"Bearer {token_service.issue(999_999)}")

    response = await async_client.post("/api/posts", json={"title": "hi", "content": "world"})

    assert response.status_code == 401
    assert response.json()["detail"] == AUTH_FAILURE_MESSAGES[AuthFailure.UNKNOWN_PRINCIPAL]
    _assert_cookie_cleared(response)


@pytest.mark.asyncio
async def test_authentication_runs_before_existence_and_ownership(async_client: AsyncClient):
    missing_update = await async_client.put(
        "/api/posts/999999", json={"title": "hi", "content": "world"}
    )
    missing_delete = await async_client.delete("/api/posts/999999")
    malformed_body = await async_client.put("/api/posts/999999", json={"title": 123})
    missing_like = await async_client.put("/api/posts/999999/like")

    assert missing_update.status_code == 401
    assert missing_delete.status_code == 401
    assert malformed_body.status_code == 401
    assert missing_like.status_code == 401


@pytest.mark.asyncio
async def test_login_cookie_authenticates_following_requests(async_client: AsyncClient):
    await _signup_and_login(async_client, "alice1")

    response = await async_client.post("/api/posts", json={"title": "hi", "content": "world"})

    assert response.status_code == 201
