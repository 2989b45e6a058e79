"""
Accept Invitation Use Case

Turns a pending invitation into an active member linked to an auth identity.
"""

from typing import Callable

from libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateEntryError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import InvitationStatus, Member, MemberStatus

from .dtos import AcceptInvitationResponse
from .errors import INVITATION_EXPIRED, INVITATION_NOT_FOUND, MEMBER_ALREADY_EXISTS
from .expiry import expire_invitation

INVITATION_INVALID = Error("INVITATION_INVALID", "Diese Einladung ist nicht mehr gültig")


class AcceptInvitationUseCase:
    """
    Use case for accepting invitations.

    Business Rules:
    - authUserId, firstName and lastName are required
    - Only a PENDING, unexpired invitation can be accepted
    - Member creation and the PENDING -> ACCEPTED transition share one
      transaction; the transition is conditional so concurrent accepts
      produce exactly one member
    """

    def __init__(self, uow: UnitOfWork, now: Callable = utcnow):
        self.uow = uow
        self.now = now

    async def execute(
        self, token: str, auth_user_id: str, first_name: str, last_name: str
    ) -> Result[AcceptInvitationResponse]:
        """
        Execute accept invitation use case.

        Args:
            token: Invitation token from the invite link
            auth_user_id: Identity created by the auth provider at sign-up
            first_name: Member first name
            last_name: Member last name

        Returns:
            Result with AcceptInvitationResponse DTO, or Error
        """
        if not auth_user_id or not first_name or not last_name:
            return Return.err(Error("MISSING_DATA", "Fehlende Daten"))

        async with self.uow:
            invitation = await self.uow.invitations.get_by_token(token)
            if invitation is None:
                return Return.err(INVITATION_NOT_FOUND)

            if invitation.status == InvitationStatus.expired:
                return Return.err(INVITATION_EXPIRED)

            if invitation.status != InvitationStatus.pending:
                return Return.err(INVITATION_INVALID)

            now = self.now()
            if invitation.is_expired(now):
                await expire_invitation(self.uow, invitation)
                return Return.err(INVITATION_EXPIRED)

            role = await self.uow.roles.get_by_tenant_and_type(
                invitation.tenant_id, invitation.role_type
            )
            if role is None:
                return Return.err(Error("ROLE_NOT_FOUND", "Rolle nicht gefunden"))

            member = Member(
                tenant_id=invitation.tenant_id,
                auth_user_id=auth_user_id,
                email=invitation.email,
                first_name=first_name.strip(),
                last_name=last_name.strip(),
                role_id=role.id,
                status=MemberStatus.active,
                is_active=True,
            )

            try:
                await self.uow.members.create(member)
                # Accepted rows of earlier, since deleted memberships
                await self.uow.invitations.delete_stale(
                    invitation.tenant_id,
                    invitation.email,
                    statuses=(InvitationStatus.accepted,),
                )
                if not await self.uow.invitations.mark_accepted(invitation.id, now):
                    await self.uow.rollback()
                    return Return.err(INVITATION_INVALID)
                await self.uow.commit()
            except DuplicateEntryError:
                return Return.err(
                    Error(
                        MEMBER_ALREADY_EXISTS.code,
                        "Ein Mitglied mit dieser E-Mail existiert bereits",
                    )
                )

            return Return.ok(AcceptInvitationResponse())
