import logging
from typing import Optional

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Member, RoleType
from src.domain.permissions import PermissionSet

logger = logging.getLogger(__name__)


class PermissionEvaluator:
    """
    Computes a member's capabilities from the database.

    Permissions are recomputed on every call so role changes apply
    immediately. Must be used inside an open unit of work.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def permissions_for(self, member: Member) -> PermissionSet:
        if member.role_id is None:
            return PermissionSet()
        codes = await self.uow.roles.get_permission_codes(member.role_id)
        return PermissionSet.from_codes(codes)

    async def role_type_of(self, member: Member) -> Optional[RoleType]:
        if member.role_id is None:
            return None
        role = await self.uow.roles.get_by_id(member.role_id)
        return role.type if role else None

    async def check_member_deletion(self, actor: Member, target: Member) -> Result[None]:
        """Guard rails for deleting target on behalf of actor"""
        if target.tenant_id != actor.tenant_id:
            return Return.err(
                Error("FORBIDDEN_TENANT", "Keine Berechtigung für dieses Mitglied")
            )

        if target.id == actor.id:
            return Return.err(
                Error("CANNOT_DELETE_SELF", "Sie können sich nicht selbst löschen")
            )

        if await self.role_type_of(target) == RoleType.admin:
            admin_count = await self.uow.members.count_active_by_role_type(
                actor.tenant_id, RoleType.admin
            )
            if admin_count <= 1:
                return Return.err(
                    Error(
                        "CANNOT_DELETE_LAST_ADMIN",
                        "Der letzte Administrator kann nicht gelöscht werden. "
                        "Ernennen Sie zuerst einen anderen Administrator.",
                    )
                )

        return Return.ok(None)
