from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.member_repository import IMemberRepository
from src.domain.entities import Member, Role, RoleType

from .base import flush


class MemberRepository(IMemberRepository):
    """Member repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, member_id: UUID) -> Optional[Member]:
        """Get member by ID"""
        stmt = select(Member).where(Member.id == member_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_auth_user_id(self, auth_user_id: str) -> Optional[Member]:
        """Get the member linked to an external auth identity"""
        stmt = select(Member).where(Member.auth_user_id == auth_user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_tenant_and_email(self, tenant_id: UUID, email: str) -> Optional[Member]:
        """Get member by tenant and email"""
        stmt = select(Member).where(
            Member.tenant_id == tenant_id, Member.email == email.lower()
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Member]:
        """Get any member with this email, across tenants"""
        stmt = select(Member).where(Member.email == email.lower()).limit(1)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_tenant_id(self, tenant_id: UUID) -> List[Member]:
        """Get all members of a tenant"""
        stmt = (
            select(Member)
            .where(Member.tenant_id == tenant_id)
            .order_by(Member.last_name, Member.first_name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_active_by_role_type(self, tenant_id: UUID, role_type: RoleType) -> int:
        """Count active members holding a role of the given type"""
        stmt = (
            select(func.count(Member.id))
            .join(Role, Role.id == Member.role_id)
            .where(
                Member.tenant_id == tenant_id,
                Member.is_active == True,  # noqa: E712
                Role.type == role_type,
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, member: Member) -> Member:
        """Create a new member"""
        self.session.add(member)
        await flush(self.session)
        await self.session.refresh(member)
        return member

    async def update(self, member: Member) -> Member:
        """Update existing member"""
        self.session.add(member)
        await flush(self.session)
        await self.session.refresh(member)
        return member

    async def delete(self, member: Member) -> None:
        """Delete a member"""
        await self.session.delete(member)
        await flush(self.session)
