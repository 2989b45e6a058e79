"""
Supabase Auth adapter

Talks to the GoTrue REST API of a Supabase project.
"""

import logging
from typing import Optional

import httpx

from src.app.services.auth_provider import (
    AuthProviderError,
    AuthSession,
    AuthUser,
    IAuthProvider,
)

from .supabase_jwt import verify_access_token

logger = logging.getLogger(__name__)


def _user_from_payload(payload: dict) -> AuthUser:
    return AuthUser(
        id=payload["sub"],
        email=payload.get("email"),
        metadata=payload.get("user_metadata") or {},
    )


def _user_from_api(body: dict) -> AuthUser:
    return AuthUser(
        id=body["id"],
        email=body.get("email"),
        metadata=body.get("user_metadata") or {},
    )


class SupabaseAuthProvider(IAuthProvider):
    def __init__(
        self,
        url: str,
        anon_key: str,
        service_role_key: str,
        jwt_secret: str,
        timeout: float = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = url.rstrip("/")
        self.anon_key = anon_key
        self.service_role_key = service_role_key
        self.jwt_secret = jwt_secret
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    def _headers(self, key: str) -> dict:
        return {"apikey": key, "Authorization": f"Bearer {key}"}

    async def get_session(
        self, access_token: Optional[str], refresh_token: Optional[str]
    ) -> Optional[AuthSession]:
        if access_token:
            payload = verify_access_token(access_token, self.jwt_secret)
            if payload is not None:
                return AuthSession(user=_user_from_payload(payload))

        if not refresh_token:
            return None
        return await self._refresh(refresh_token)

    async def _refresh(self, refresh_token: str) -> Optional[AuthSession]:
        url = f"{self.base_url}/auth/v1/token"
        try:
            async with self._client() as client:
                resp = await client.post(
                    url,
                    params={"grant_type": "refresh_token"},
                    headers=self._headers(self.anon_key),
                    json={"refresh_token": refresh_token},
                )
        except httpx.HTTPError as exc:
            logger.warning(f"Session refresh failed: {exc}")
            return None

        if resp.status_code != 200:
            logger.info(f"Session refresh rejected with status {resp.status_code}")
            return None

        body = resp.json()
        return AuthSession(
            user=_user_from_api(body["user"]),
            access_token=body["access_token"],
            refresh_token=body["refresh_token"],
        )

    async def sign_up(
        self, email: str, password: str, metadata: dict, redirect_to: str
    ) -> AuthUser:
        url = f"{self.base_url}/auth/v1/signup"
        try:
            async with self._client() as client:
                resp = await client.post(
                    url,
                    params={"redirect_to": redirect_to},
                    headers=self._headers(self.anon_key),
                    json={"email": email, "password": password, "data": metadata},
                )
        except httpx.HTTPError as exc:
            raise AuthProviderError(f"Auth provider unreachable: {exc}") from exc

        if resp.status_code not in (200, 201):
            body = resp.json() if resp.content else {}
            message = body.get("msg") or body.get("error_description") or resp.text
            raise AuthProviderError(message)

        body = resp.json()
        # With email confirmation enabled the user object is returned bare
        user = body.get("user") or body
        if not user.get("id"):
            raise AuthProviderError("Auth provider returned no user")
        return _user_from_api(user)

    async def delete_user(self, auth_user_id: str) -> None:
        if not self.service_role_key:
            raise AuthProviderError("Supabase admin credentials not configured")

        url = f"{self.base_url}/auth/v1/admin/users/{auth_user_id}"
        try:
            async with self._client() as client:
                resp = await client.delete(url, headers=self._headers(self.service_role_key))
        except httpx.HTTPError as exc:
            raise AuthProviderError(f"Auth provider unreachable: {exc}") from exc

        if resp.status_code not in (200, 204):
            raise AuthProviderError(f"Auth user deletion failed: {resp.text}")
