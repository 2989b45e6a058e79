import logging

from src.app.services.email_sender import IEmailSender
from src.app.services.email_templates import invitation_email_html, invitation_subject
from src.domain.entities import RoleType, role_display_name

logger = logging.getLogger(__name__)


def invite_url_for(app_url: str, token: str) -> str:
    return f"{app_url.rstrip('/')}/invite/{token}"


async def send_invitation_email(
    email_sender: IEmailSender,
    to: str,
    role_type: RoleType,
    invite_url: str,
    club_name: str,
    invited_by_name: str,
    expires_in_days: int,
) -> bool:
    """Best-effort delivery; failures are logged and reported as False"""
    result = await email_sender.send(
        to=to,
        subject=invitation_subject(club_name),
        html=invitation_email_html(
            invite_url=invite_url,
            club_name=club_name,
            role_name=role_display_name(role_type),
            invited_by_name=invited_by_name,
            expires_in_days=expires_in_days,
        ),
    )
    if not result.success:
        logger.warning(f"Invitation for {to} stored but email failed: {result.error}")
    return result.success
