"""
Session Gate Middleware

Refreshes the auth session on every request, exposes the principal on
``request.state.principal`` and decides redirects for page routes. API
routes are never redirected; their handlers answer 401 instead.
"""

import logging
from typing import Callable, Optional
from urllib.parse import quote

from fastapi import Request, Response
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from src.app.services.auth_provider import AuthSession

from .paths import is_static_asset, matches_prefix, replace_request_headers

logger = logging.getLogger(__name__)

ACCESS_TOKEN_COOKIE = "sb-access-token"
REFRESH_TOKEN_COOKIE = "sb-refresh-token"
LOCALE_COOKIE = "locale"
SUPPORTED_LOCALES = ("de", "en")

PUBLIC_PREFIXES = (
    "/sign-in",
    "/sign-up",
    "/forgot-password",
    "/reset-password",
    "/auth/callback",
    "/public",
    "/invite",
    "/register",
    "/health",
)
AUTH_PAGES = ("/sign-in", "/sign-up")
SIGN_IN_PATH = "/sign-in"
HOME_PATH = "/dashboard"


def is_public_path(path: str, method: str = "GET") -> bool:
    if path == "/" or matches_prefix(path, PUBLIC_PREFIXES):
        return True
    # Invitation lookup and acceptance happen before the invitee has an account
    if path.startswith("/api/invitations/"):
        return method == "GET" or path.endswith("/accept")
    return False


def is_api_path(path: str) -> bool:
    return path == "/api" or path.startswith("/api/")


def redirect_target(path: str, method: str, authenticated: bool) -> Optional[str]:
    """Where a page request must be redirected, or None to let it through"""
    if is_api_path(path):
        return None
    if authenticated and matches_prefix(path, AUTH_PAGES):
        return HOME_PATH
    if is_public_path(path, method):
        return None
    if not authenticated:
        return f"{SIGN_IN_PATH}?redirectTo={quote(path, safe='/')}"
    return None


def resolve_locale(
    cookie_locale: Optional[str], accept_language: Optional[str], default: str = "de"
) -> str:
    if cookie_locale in SUPPORTED_LOCALES:
        return cookie_locale
    if accept_language and accept_language.lower().startswith("en"):
        return "en"
    return default


class SessionGateMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, *, default_locale: str = "de", secure_cookies: bool = False):
        super().__init__(app)
        self.default_locale = default_locale
        self.secure_cookies = secure_cookies

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if is_static_asset(path):
            return await call_next(request)

        auth_provider = request.app.state.auth_provider
        session = await auth_provider.get_session(
            request.cookies.get(ACCESS_TOKEN_COOKIE),
            request.cookies.get(REFRESH_TOKEN_COOKIE),
        )
        request.state.principal = session.user if session else None

        locale = resolve_locale(
            request.cookies.get(LOCALE_COOKIE),
            request.headers.get("accept-language"),
            self.default_locale,
        )
        replace_request_headers(request.scope, {"x-locale": locale})

        target = redirect_target(path, request.method, session is not None)
        if target is not None:
            response = RedirectResponse(target, status_code=307)
        else:
            response = await call_next(request)

        response.headers["x-locale"] = locale
        if session is not None and session.rotated:
            self._write_session_cookies(response, session)
        return response

    def _write_session_cookies(self, response: Response, session: AuthSession) -> None:
        for name, value in (
            (ACCESS_TOKEN_COOKIE, session.access_token),
            (REFRESH_TOKEN_COOKIE, session.refresh_token),
        ):
            response.set_cookie(
                name,
                value,
                httponly=True,
                samesite="lax",
                secure=self.secure_cookies,
                path="/",
            )
