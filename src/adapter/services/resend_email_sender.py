import logging
from typing import Optional

import httpx

from src.app.services.email_sender import EmailResult, IEmailSender

logger = logging.getLogger(__name__)


class ResendEmailSender(IEmailSender):
    """Sends email through the Resend HTTP API"""

    def __init__(
        self,
        api_key: str,
        from_email: str,
        api_url: str = "https://api.resend.com",
        timeout: float = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.from_email = from_email
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        if not api_key:
            logger.warning("RESEND_API_KEY not set - emails will not be sent")

    async def send(self, to: str, subject: str, html: str) -> EmailResult:
        if not self.api_key:
            return EmailResult(success=False, error="Email delivery is not configured")

        payload = {"from": self.from_email, "to": [to], "subject": subject, "html": html}
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.post(f"{self.api_url}/emails", json=payload, headers=headers)
        except httpx.HTTPError as exc:
            logger.error(f"Email send exception for {to}: {exc}")
            return EmailResult(success=False, error="Fehler beim Email-Versand")

        if resp.status_code not in (200, 201):
            logger.error(f"Email send error for {to}: {resp.status_code} {resp.text}")
            return EmailResult(success=False, error=resp.text)

        message_id = resp.json().get("id")
        logger.info(f"Email sent to {to} (id: {message_id})")
        return EmailResult(success=True, message_id=message_id)
