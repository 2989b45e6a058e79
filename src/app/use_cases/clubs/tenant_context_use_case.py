from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import MEMBER_NOT_FOUND, load_actor

from .dtos import TenantContext

TENANT_NOT_FOUND = Error("TENANT_NOT_FOUND", "Kein Club für den angemeldeten Benutzer gefunden")


class GetTenantContextUseCase:
    """Tenant of the signed-in member; a missing tenant is a server error"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth_user_id: str) -> Result[TenantContext]:
        async with self.uow:
            member = await load_actor(self.uow, auth_user_id)
            if member is None:
                return Return.err(MEMBER_NOT_FOUND)

            tenant = await self.uow.tenants.get_by_id(member.tenant_id)
            if tenant is None:
                return Return.err(TENANT_NOT_FOUND)

            return Return.ok(TenantContext.model_validate(tenant, from_attributes=True))
