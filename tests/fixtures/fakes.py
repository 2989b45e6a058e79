"""
In-memory stand-ins for the external services, installed on ``app.state``
by the integration fixtures.
"""

from typing import Dict, List, Optional
from uuid import uuid4

from src.app.services.auth_provider import (
    AuthProviderError,
    AuthSession,
    AuthUser,
    IAuthProvider,
)
from src.app.services.avatar_storage import IAvatarStorage
from src.app.services.email_sender import EmailResult, IEmailSender


class FakeAuthProvider(IAuthProvider):
    def __init__(self):
        self.sessions: Dict[str, AuthUser] = {}
        self.refresh_tokens: Dict[str, AuthUser] = {}
        self.users: Dict[str, AuthUser] = {}
        self.deleted: List[str] = []

    def issue(self, user: AuthUser) -> str:
        """Access token for user, as if they had just signed in"""
        token = f"access-{uuid4().hex}"
        self.sessions[token] = user
        return token

    def issue_refresh(self, user: AuthUser) -> str:
        token = f"refresh-{uuid4().hex}"
        self.refresh_tokens[token] = user
        return token

    def user_by_email(self, email: str) -> Optional[AuthUser]:
        return next((u for u in self.users.values() if u.email == email), None)

    async def get_session(
        self, access_token: Optional[str], refresh_token: Optional[str]
    ) -> Optional[AuthSession]:
        if access_token in self.sessions:
            return AuthSession(user=self.sessions[access_token])
        if refresh_token in self.refresh_tokens:
            user = self.refresh_tokens.pop(refresh_token)
            return AuthSession(
                user=user,
                access_token=self.issue(user),
                refresh_token=self.issue_refresh(user),
            )
        return None

    async def sign_up(
        self, email: str, password: str, metadata: dict, redirect_to: str
    ) -> AuthUser:
        if self.user_by_email(email):
            raise AuthProviderError("User already registered")
        user = AuthUser(id=str(uuid4()), email=email, metadata=metadata)
        self.users[user.id] = user
        return user

    async def delete_user(self, auth_user_id: str) -> None:
        self.users.pop(auth_user_id, None)
        self.deleted.append(auth_user_id)


class FakeEmailSender(IEmailSender):
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.outbox: List[dict] = []

    async def send(self, to: str, subject: str, html: str) -> EmailResult:
        if self.fail:
            return EmailResult(success=False, error="delivery disabled")
        self.outbox.append({"to": to, "subject": subject, "html": html})
        return EmailResult(success=True, message_id=f"msg-{len(self.outbox)}")


class FakeAvatarStorage(IAvatarStorage):
    PREFIX = "https://storage.test/avatars/"

    def __init__(self):
        self.objects: Dict[str, bytes] = {}

    async def upload(self, path: str, content: bytes, content_type: str) -> str:
        self.objects[path] = content
        return f"{self.PREFIX}{path}"

    async def remove(self, path: str) -> None:
        self.objects.pop(path, None)

    def path_from_url(self, public_url: str) -> Optional[str]:
        if not public_url.startswith(self.PREFIX):
            return None
        return public_url[len(self.PREFIX):]
