"""
Shared building blocks for use cases.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from libs.result import Error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Member

MEMBER_NOT_FOUND = Error("MEMBER_NOT_FOUND", "Mitglied nicht gefunden")
FEATURE_DISABLED = Error("FEATURE_DISABLED", "Diese Funktion ist für diesen Club nicht aktiviert")

EVENTS_FEATURE = "events"
PLANNING_FEATURE = "planning"
WEBSITE_FEATURE = "website"


class CamelModel(BaseModel):
    """DTO base rendered with camelCase keys"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


async def load_actor(uow: UnitOfWork, auth_user_id: str) -> Optional[Member]:
    """Member linked to the signed-in identity; call inside an open unit of work"""
    return await uow.members.get_by_auth_user_id(auth_user_id)


def is_feature_enabled(tenant, feature: str) -> bool:
    """Accepts a Tenant row or a cached TenantSnapshot"""
    return feature in (tenant.features or [])


async def require_feature(uow: UnitOfWork, tenant_id: UUID, feature: str) -> Optional[Error]:
    """FEATURE_DISABLED unless the tenant has the feature switched on"""
    tenant = await uow.tenants.get_by_id(tenant_id)
    if tenant is None or not is_feature_enabled(tenant, feature):
        return FEATURE_DISABLED
    return None
