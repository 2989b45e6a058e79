from libs.result import Error, Result, Return
from src.app.services.permission_evaluator import PermissionEvaluator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import MEMBER_NOT_FOUND, load_actor
from src.domain.entities import InvitationStatus

from .dtos import RevokeInvitationResponse
from .errors import FOREIGN_INVITATION, FORBIDDEN, INVITATION_NOT_FOUND


class RevokeInvitationUseCase:
    """
    Use case for revoking pending invitations.

    The row is hard-deleted so the same email can be invited again; a second
    revoke of the same token therefore reports not found.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, auth_user_id: str, token_or_id: str
    ) -> Result[RevokeInvitationResponse]:
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
                        "Nur ausstehende Einladungen können gelöscht werden",
                    )
                )

            await self.uow.invitations.delete(invitation)
            await self.uow.commit()

            return Return.ok(RevokeInvitationResponse())
