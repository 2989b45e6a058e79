"""
Get Invitation Use Case

Loads an invitation for the public acceptance page.
"""

from typing import Callable

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import InvitationStatus, role_display_name

from .dtos import InvitationDetails
from .errors import INVITATION_EXPIRED, INVITATION_NOT_FOUND
from .expiry import expire_invitation


class GetInvitationUseCase:
    """
    Business Rules:
    - Lookup by token, or by ID for older links
    - Only PENDING invitations are shown; EXPIRED ones report expiry
    - A pending invitation read after its expiry is marked EXPIRED
    - The token is never returned
    """

    def __init__(self, uow: UnitOfWork, now: Callable = utcnow):
        self.uow = uow
        self.now = now

    async def execute(self, token_or_id: str) -> Result[InvitationDetails]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_token_or_id(token_or_id)
            if invitation is None:
                return Return.err(INVITATION_NOT_FOUND)

            if invitation.status == InvitationStatus.expired:
                return Return.err(INVITATION_EXPIRED)

            if invitation.status != InvitationStatus.pending:
                return Return.err(
                    Error(
                        "INVITATION_INVALID",
                        "Diese Einladung wurde bereits verwendet oder zurückgezogen",
                    )
                )

            if invitation.is_expired(self.now()):
                await expire_invitation(self.uow, invitation)
                return Return.err(INVITATION_EXPIRED)

            tenant = await self.uow.tenants.get_by_id(invitation.tenant_id)
            inviter = await self.uow.members.get_by_id(invitation.invited_by_id)

            return Return.ok(
                InvitationDetails(
                    id=invitation.id,
                    email=invitation.email,
                    tenant_name=tenant.name,
                    role_name=role_display_name(invitation.role_type),
                    invited_by_name=inviter.full_name if inviter else "",
                    expires_at=invitation.expires_at,
                )
            )
