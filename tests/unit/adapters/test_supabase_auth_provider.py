import json
import time

import httpx
import pytest
from jose import jwt

from src.adapter.services.supabase_auth_provider import SupabaseAuthProvider
from src.app.services.auth_provider import AuthProviderError

SECRET = "test-jwt-secret"
BASE_URL = "https://project.supabase.co"


def _token(sub="user-1", expires_in=3600, audience="authenticated"):
    claims = {
        "sub": sub,
        "email": "anna@example.com",
        "aud": audience,
        "exp": int(time.time()) + expires_in,
    }
    return jwt.encode(claims, SECRET, algorithm="HS256")


def _provider(handler) -> SupabaseAuthProvider:
    return SupabaseAuthProvider(
        BASE_URL, "anon", "service", SECRET, transport=httpx.MockTransport(handler)
    )


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"unexpected request {request.url}")


@pytest.mark.asyncio
async def test_valid_access_token_needs_no_round_trip():
    session = await _provider(_unreachable).get_session(_token(), None)

    assert session.user.id == "user-1"
    assert session.user.email == "anna@example.com"
    assert session.rotated is False


@pytest.mark.asyncio
async def test_expired_token_is_refreshed():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/auth/v1/token"
        assert request.url.params["grant_type"] == "refresh_token"
        assert json.loads(request.content) == {"refresh_token": "r-1"}
        return httpx.Response(
            200,
            json={
                "access_token": "a-2",
                "refresh_token": "r-2",
                "user": {"id": "user-1", "email": "anna@example.com"},
            },
        )

    session = await _provider(handler).get_session(_token(expires_in=-60), "r-1")

    assert session.rotated is True
    assert session.access_token == "a-2"
    assert session.refresh_token == "r-2"


@pytest.mark.asyncio
async def test_rejected_refresh_is_anonymous():
    session = await _provider(lambda request: httpx.Response(400, json={})).get_session(
        "garbage", "r-1"
    )

    assert session is None


@pytest.mark.asyncio
async def test_no_cookies_is_anonymous():
    assert await _provider(_unreachable).get_session(None, None) is None


@pytest.mark.asyncio
async def test_wrong_audience_is_rejected():
    assert await _provider(_unreachable).get_session(_token(audience="anon"), None) is None


@pytest.mark.asyncio
async def test_sign_up_returns_user():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/auth/v1/signup"
        assert request.url.params["redirect_to"] == "https://app/auth/callback"
        body = json.loads(request.content)
        assert body["data"] == {"first_name": "Max"}
        return httpx.Response(200, json={"id": "new-user", "email": body["email"]})

    user = await _provider(handler).sign_up(
        "max@example.com", "geheim123", {"first_name": "Max"}, "https://app/auth/callback"
    )

    assert user.id == "new-user"


@pytest.mark.asyncio
async def test_sign_up_failure_raises():
    handler = lambda request: httpx.Response(422, json={"msg": "User already registered"})

    with pytest.raises(AuthProviderError, match="already registered"):
        await _provider(handler).sign_up("max@example.com", "geheim123", {}, "https://app")


@pytest.mark.asyncio
async def test_delete_user_uses_service_role():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "DELETE"
        assert request.url.path == "/auth/v1/admin/users/user-1"
        assert request.headers["authorization"] == "Bearer service"
        return httpx.Response(200, json={})

    await _provider(handler).delete_user("user-1")
