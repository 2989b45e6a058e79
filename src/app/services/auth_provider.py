from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class AuthUser:
    """Identity asserted by the external auth provider"""

    id: str
    email: Optional[str] = None
    metadata: dict = field(default_factory=dict)


@dataclass(frozen=True)
class AuthSession:
    """
    Outcome of session verification.

    ``access_token``/``refresh_token`` are set only when the provider rotated
    the tokens and the caller must write them back as cookies.
    """

    user: AuthUser
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None

    @property
    def rotated(self) -> bool:
        return self.access_token is not None


class AuthProviderError(Exception):
    """The auth provider rejected a request or was unreachable"""


class IAuthProvider(ABC):
    """Delegated authentication port"""

    @abstractmethod
    async def get_session(
        self, access_token: Optional[str], refresh_token: Optional[str]
    ) -> Optional[AuthSession]:
        """Verify the session cookies, refreshing if needed; None when anonymous"""
        pass

    @abstractmethod
    async def sign_up(
        self, email: str, password: str, metadata: dict, redirect_to: str
    ) -> AuthUser:
        """Create an identity; raises AuthProviderError on failure"""
        pass

    @abstractmethod
    async def delete_user(self, auth_user_id: str) -> None:
        """Delete an identity with admin rights; raises AuthProviderError on failure"""
        pass
