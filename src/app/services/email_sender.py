from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EmailResult:
    success: bool
    message_id: Optional[str] = None
    error: Optional[str] = None


class IEmailSender(ABC):
    """Delegated email delivery port. Implementations never raise."""

    @abstractmethod
    async def send(self, to: str, subject: str, html: str) -> EmailResult:
        pass
