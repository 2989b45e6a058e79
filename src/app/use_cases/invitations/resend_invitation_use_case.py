"""
Resend Invitation Use Case

Re-sends the email of a pending invitation.
"""

import math
from typing import Callable

from libs.result import Error, Result, Return
from src.app.services.email_sender import IEmailSender
from src.app.services.permission_evaluator import PermissionEvaluator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import MEMBER_NOT_FOUND, load_actor
from src.domain.base import utcnow
from src.domain.entities import InvitationStatus

from .dtos import ResendInvitationResponse
from .errors import FOREIGN_INVITATION, FORBIDDEN, INVITATION_EXPIRED, INVITATION_NOT_FOUND
from .expiry import expire_invitation
from .notifications import invite_url_for, send_invitation_email


class ResendInvitationUseCase:
    """
    Business Rules:
    - Same permission as creating invitations, same club only
    - Only PENDING, unexpired invitations
    - Token and expiry stay unchanged; the email states the days left
    """

    def __init__(
        self,
        uow: UnitOfWork,
        email_sender: IEmailSender,
        app_url: str,
        now: Callable = utcnow,
    ):
        self.uow = uow
        self.email_sender = email_sender
        self.app_url = app_url
        self.now = now

    async def execute(
        self, auth_user_id: str, token_or_id: str
    ) -> Result[ResendInvitationResponse]:
        async with self.uow:
            actor = await load_actor(self.uow, auth_user_id)
            if actor is None:
                return Return.err(MEMBER_NOT_FOUND)

            permissions = await PermissionEvaluator(self.uow).permissions_for(actor)
            if not permissions.can_manage_invitations():
                return Return.err(FORBIDDEN)

            invitation = await self.uow.invitations.get_by_token_or_id(token_or_id)
            if invitation is None:
                return Return.err(INVITATION_NOT_FOUND)

            if invitation.tenant_id != actor.tenant_id:
                return Return.err(FOREIGN_INVITATION)

            if invitation.status != InvitationStatus.pending:
                return Return.err(
                    Error(
                        "INVITATION_INVALID",
                        "Nur ausstehende Einladungen können erneut gesendet werden",
                    )
                )

            now = self.now()
            if invitation.is_expired(now):
                await expire_invitation(self.uow, invitation)
                return Return.err(INVITATION_EXPIRED)

            tenant = await self.uow.tenants.get_by_id(invitation.tenant_id)
            inviter = await self.uow.members.get_by_id(invitation.invited_by_id)

            to = invitation.email
            role_type = invitation.role_type
            invite_url = invite_url_for(self.app_url, invitation.token)
            club_name = tenant.name
            invited_by_name = (inviter or actor).full_name
            seconds_left = (invitation.expires_at - now).total_seconds()

        days_remaining = max(0, math.ceil(seconds_left / 86400))

        email_sent = await send_invitation_email(
            self.email_sender,
            to=to,
            role_type=role_type,
            invite_url=invite_url,
            club_name=club_name,
            invited_by_name=invited_by_name,
            expires_in_days=days_remaining,
        )

        return Return.ok(
            ResendInvitationResponse(email_sent=email_sent, days_remaining=days_remaining)
        )
