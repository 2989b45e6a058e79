"""
Club provisioning

Seeds the global permission catalog and the system roles of a new club.
"""

import logging
from typing import Dict
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ROLE_DESCRIPTIONS, ROLE_NAMES, Permission, Role, RoleType
from src.domain.permissions import PERMISSION_CATALOG, ROLE_GRANTS, expand_grants

logger = logging.getLogger(__name__)


async def ensure_permission_catalog(uow: UnitOfWork) -> Dict[str, UUID]:
    """Create missing catalog entries; returns code -> permission id"""
    existing = {p.code: p.id for p in await uow.permissions.get_all()}

    for info in PERMISSION_CATALOG:
        if info.code.value in existing:
            continue
        permission = await uow.permissions.create(
            Permission(
                code=info.code.value,
                name=info.name,
                category=info.code.resource,
                description=info.description,
            )
        )
        existing[permission.code] = permission.id
        logger.info(f"Permission created: {permission.code}")

    return existing


async def seed_system_roles(
    uow: UnitOfWork, tenant_id: UUID, permission_ids: Dict[str, UUID]
) -> Dict[RoleType, Role]:
    """Create the six system roles of a club with their grants"""
    roles = {}
    for role_type in RoleType:
        role = await uow.roles.create(
            Role(
                tenant_id=tenant_id,
                name=ROLE_NAMES[role_type],
                type=role_type,
                description=ROLE_DESCRIPTIONS[role_type],
                is_system=True,
            )
        )
        granted = expand_grants(ROLE_GRANTS[role_type])
        await uow.roles.add_permissions(
            role.id, [permission_ids[code.value] for code in sorted(granted)]
        )
        roles[role_type] = role
    return roles
