"""
Create Invitation Use Case

Handles inviting a person by email to join the actor's club.
"""

import secrets
from datetime import timedelta
from typing import Callable

from libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateEntryError
from src.app.services.email_sender import IEmailSender
from src.app.services.permission_evaluator import PermissionEvaluator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import MEMBER_NOT_FOUND, load_actor
from src.domain.base import utcnow
from src.domain.entities import Invitation, RoleType

from .dtos import CreatedInvitation, CreateInvitationResponse
from .errors import INVITE_ALREADY_EXISTS, INVITE_FORBIDDEN, MEMBER_ALREADY_EXISTS
from .notifications import invite_url_for, send_invitation_email


class CreateInvitationUseCase:
    """
    Use case for inviting people to join a club.

    Business Rules:
    - Actor needs an invitation-management permission
    - Email is stored lower-cased
    - Existing members and pending invitations block a new invitation
    - Expired/revoked rows for the same email are purged first
    - Token is 32 bytes of URL-safe randomness, valid for 7 days
    - Email delivery happens after commit and never fails the request
    """

    def __init__(
        self,
        uow: UnitOfWork,
        email_sender: IEmailSender,
        app_url: str,
        expiry_days: int = 7,
        now: Callable = utcnow,
    ):
        self.uow = uow
        self.email_sender = email_sender
        self.app_url = app_url
        self.expiry_days = expiry_days
        self.now = now

    async def execute(
        self, auth_user_id: str, email: str, role_type: str = RoleType.member.value
    ) -> Result[CreateInvitationResponse]:
        """
        Execute create invitation use case.

        Args:
            auth_user_id: Identity of the inviting member
            email: Email address to invite
            role_type: Role type to assign on acceptance

        Returns:
            Result with CreateInvitationResponse DTO, or Error
        """
        email = (email or "").strip().lower()
        if not email:
            return Return.err(Error("EMAIL_REQUIRED", "E-Mail-Adresse erforderlich"))

        try:
            role = RoleType(role_type)
        except ValueError:
            return Return.err(Error("INVALID_ROLE", f"Ungültige Rolle: {role_type}"))

        async with self.uow:
            actor = await load_actor(self.uow, auth_user_id)
            if actor is None:
                return Return.err(MEMBER_NOT_FOUND)

            permissions = await PermissionEvaluator(self.uow).permissions_for(actor)
            if not permissions.can_manage_invitations():
                return Return.err(INVITE_FORBIDDEN)

            if await self.uow.members.get_by_tenant_and_email(actor.tenant_id, email):
                return Return.err(MEMBER_ALREADY_EXISTS)

            pending = await self.uow.invitations.get_pending_by_tenant_and_email(
                actor.tenant_id, email
            )
            if pending:
                return Return.err(INVITE_ALREADY_EXISTS)

            tenant = await self.uow.tenants.get_by_id(actor.tenant_id)

            await self.uow.invitations.delete_stale(actor.tenant_id, email)

            invitation = Invitation(
                tenant_id=actor.tenant_id,
                email=email,
                role_type=role,
                token=secrets.token_urlsafe(32),
                invited_by_id=actor.id,
                expires_at=self.now() + timedelta(days=self.expiry_days),
            )

            try:
                await self.uow.invitations.create(invitation)
                await self.uow.commit()
            except DuplicateEntryError:
                # A concurrent request created the pending row first
                return Return.err(INVITE_ALREADY_EXISTS)

        invite_url = invite_url_for(self.app_url, invitation.token)
        email_sent = await send_invitation_email(
            self.email_sender,
            to=invitation.email,
            role_type=invitation.role_type,
            invite_url=invite_url,
            club_name=tenant.name,
            invited_by_name=actor.full_name,
            expires_in_days=self.expiry_days,
        )

        return Return.ok(
            CreateInvitationResponse(
                email_sent=email_sent,
                invitation=CreatedInvitation(
                    id=invitation.id,
                    email=invitation.email,
                    expires_at=invitation.expires_at,
                    invite_url=invite_url,
                ),
            )
        )
