from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Member, RoleType


class IMemberRepository(ABC):
    """Member repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, member_id: UUID) -> Optional[Member]:
        """Get member by ID"""
        pass

    @abstractmethod
    async def get_by_auth_user_id(self, auth_user_id: str) -> Optional[Member]:
        """Get the member linked to an external auth identity"""
        pass

    @abstractmethod
    async def get_by_tenant_and_email(self, tenant_id: UUID, email: str) -> Optional[Member]:
        """Get member by tenant and email"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Member]:
        """Get any member with this email, across tenants"""
        pass

    @abstractmethod
    async def get_by_tenant_id(self, tenant_id: UUID) -> List[Member]:
        """Get all members of a tenant"""
        pass

    @abstractmethod
    async def count_active_by_role_type(self, tenant_id: UUID, role_type: RoleType) -> int:
        """Count active members holding a role of the given type"""
        pass

    @abstractmethod
    async def create(self, member: Member) -> Member:
        """Create a new member"""
        pass

    @abstractmethod
    async def update(self, member: Member) -> Member:
        """Update existing member"""
        pass

    @abstractmethod
    async def delete(self, member: Member) -> None:
        """Delete a member"""
        pass
