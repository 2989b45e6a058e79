from typing import Iterable, List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.role_repository import IRoleRepository
from src.domain.entities import Permission, Role, RolePermission, RoleType

from .base import flush


class RoleRepository(IRoleRepository):
    """Role repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, role_id: UUID) -> Optional[Role]:
        """Get role by ID"""
        stmt = select(Role).where(Role.id == role_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_tenant_and_type(
        self, tenant_id: UUID, role_type: RoleType
    ) -> Optional[Role]:
        """Get the tenant's role of the given type"""
        stmt = select(Role).where(Role.tenant_id == tenant_id, Role.type == role_type)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_tenant_id(self, tenant_id: UUID) -> List[Role]:
        """Get all roles of a tenant"""
        stmt = select(Role).where(Role.tenant_id == tenant_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, role: Role) -> Role:
        """Create a new role"""
        self.session.add(role)
        await flush(self.session)
        await self.session.refresh(role)
        return role

    async def add_permissions(self, role_id: UUID, permission_ids: Iterable[UUID]) -> None:
        """Link permissions to a role"""
        for permission_id in permission_ids:
            self.session.add(RolePermission(role_id=role_id, permission_id=permission_id))
        await flush(self.session)

    async def get_permission_codes(self, role_id: UUID) -> List[str]:
        """Get the permission codes granted to a role"""
        stmt = (
            select(Permission.code)
            .join(RolePermission, RolePermission.permission_id == Permission.id)
            .where(RolePermission.role_id == role_id)
            .order_by(Permission.code)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
