from typing import Callable

from libs.result import Result, Return
from src.app.services.permission_evaluator import PermissionEvaluator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import MEMBER_NOT_FOUND, load_actor
from src.domain.base import utcnow
from src.domain.entities import role_display_name

from .dtos import InvitationListResponse, InvitationSummary
from .errors import FORBIDDEN


class ListInvitationsUseCase:
    """Pending invitations of the actor's club, newest first"""

    def __init__(self, uow: UnitOfWork, now: Callable = utcnow):
        self.uow = uow
        self.now = now

    async def execute(self, auth_user_id: str) -> Result[InvitationListResponse]:
        async with self.uow:
            actor = await load_actor(self.uow, auth_user_id)
            if actor is None:
                return Return.err(MEMBER_NOT_FOUND)

            permissions = await PermissionEvaluator(self.uow).permissions_for(actor)
            if not permissions.can_manage_invitations():
                return Return.err(FORBIDDEN)

            invitations = await self.uow.invitations.get_pending_by_tenant_id(actor.tenant_id)

            inviter_names = {}
            for invitation in invitations:
                if invitation.invited_by_id not in inviter_names:
                    inviter = await self.uow.members.get_by_id(invitation.invited_by_id)
                    inviter_names[invitation.invited_by_id] = inviter.full_name if inviter else ""

            now = self.now()
            return Return.ok(
                InvitationListResponse(
                    invitations=[
                        InvitationSummary(
                            id=invitation.id,
                            email=invitation.email,
                            role_type=invitation.role_type.value,
                            role_name=role_display_name(invitation.role_type),
                            invited_by_name=inviter_names[invitation.invited_by_id],
                            expires_at=invitation.expires_at,
                            created_at=invitation.created_at,
                            is_expired=invitation.is_expired(now),
                        )
                        for invitation in invitations
                    ]
                )
            )
