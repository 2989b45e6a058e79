"""
Remove Member Use Case

Handles deleting members from a club.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.auth_provider import AuthProviderError, IAuthProvider
from src.app.services.permission_evaluator import PermissionEvaluator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import MEMBER_NOT_FOUND, load_actor

from .dtos import RemoveMemberResponse

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """
    Use case for deleting members from a club.

    Business Rules:
    - Requires admin.users or members.delete
    - Members cannot delete themselves or members of another club
    - The last active administrator cannot be deleted
    - The linked auth identity is deleted best-effort
    - Invitations sent by the member are deleted, their events move to the
      deleting member, their registrations are removed
    """

    def __init__(self, uow: UnitOfWork, auth_provider: IAuthProvider):
        self.uow = uow
        self.auth_provider = auth_provider

    async def execute(
        self, auth_user_id: str, target_member_id: UUID
    ) -> Result[RemoveMemberResponse]:
        """
        Execute remove member use case.

        Args:
            auth_user_id: Identity of the member performing the deletion
            target_member_id: Member to delete

        Returns:
            Result with RemoveMemberResponse DTO, or Error
        """
        async with self.uow:
            actor = await load_actor(self.uow, auth_user_id)
            if actor is None:
                return Return.err(MEMBER_NOT_FOUND)

            evaluator = PermissionEvaluator(self.uow)
            permissions = await evaluator.permissions_for(actor)
            if not permissions.can_delete_members():
                return Return.err(
                    Error("FORBIDDEN", "Keine Berechtigung zum Löschen von Mitgliedern")
                )

            target = await self.uow.members.get_by_id(target_member_id)
            if target is None:
                return Return.err(MEMBER_NOT_FOUND)

            guard = await evaluator.check_member_deletion(actor, target)
            if guard.is_err():
                return guard

            if target.auth_user_id:
                try:
                    await self.auth_provider.delete_user(target.auth_user_id)
                    logger.info(f"Auth user deleted: {target.auth_user_id}")
                except AuthProviderError as exc:
                    # Member deletion continues without the identity cleanup
                    logger.error(f"Error deleting auth user {target.auth_user_id}: {exc}")

            removed_email = target.email
            await self.uow.invitations.delete_by_inviter(target.id)
            await self.uow.events.reassign_creator(target.id, actor.id)
            await self.uow.registrations.delete_by_member(target.id)
            await self.uow.members.delete(target)

            await self.uow.commit()

            logger.info(f"Member deleted: {removed_email} (tenant {actor.tenant_id})")
            return Return.ok(RemoveMemberResponse())
