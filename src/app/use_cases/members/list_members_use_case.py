from libs.result import Error, Result, Return
from src.app.services.permission_evaluator import PermissionEvaluator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import MEMBER_NOT_FOUND, load_actor
from src.domain.permissions import PermissionCode

from .dtos import MemberListResponse, MemberSummary, RoleInfo


class ListMembersUseCase:
    """Members of the actor's club; phone numbers need members.read.full"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth_user_id: str) -> Result[MemberListResponse]:
        async with self.uow:
            actor = await load_actor(self.uow, auth_user_id)
            if actor is None:
                return Return.err(MEMBER_NOT_FOUND)

            permissions = await PermissionEvaluator(self.uow).permissions_for(actor)
            if not (
                permissions.has(PermissionCode.members_read)
                or permissions.has(PermissionCode.admin_users)
            ):
                return Return.err(Error("FORBIDDEN", "Keine Berechtigung"))
            full_details = permissions.has(
                PermissionCode.members_read_full
            ) or permissions.has(PermissionCode.admin_users)

            roles = {
                role.id: role for role in await self.uow.roles.get_by_tenant_id(actor.tenant_id)
            }
            members = await self.uow.members.get_by_tenant_id(actor.tenant_id)

            summaries = []
            for member in members:
                role = roles.get(member.role_id)
                summaries.append(
                    MemberSummary(
                        id=member.id,
                        first_name=member.first_name,
                        last_name=member.last_name,
                        email=member.email,
                        phone=member.phone if full_details else None,
                        avatar_url=member.avatar_url,
                        is_active=member.is_active,
                        status=member.status.value,
                        role=RoleInfo(type=role.type.value, name=role.name) if role else None,
                        created_at=member.created_at,
                    )
                )

            return Return.ok(MemberListResponse(members=summaries))
