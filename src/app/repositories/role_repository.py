from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from uuid import UUID

from src.domain.entities import Role, RoleType


class IRoleRepository(ABC):
    """Role repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, role_id: UUID) -> Optional[Role]:
        """Get role by ID"""
        pass

    @abstractmethod
    async def get_by_tenant_and_type(
        self, tenant_id: UUID, role_type: RoleType
    ) -> Optional[Role]:
        """Get the tenant's role of the given type"""
        pass

    @abstractmethod
    async def get_by_tenant_id(self, tenant_id: UUID) -> List[Role]:
        """Get all roles of a tenant"""
        pass

    @abstractmethod
    async def create(self, role: Role) -> Role:
        """Create a new role"""
        pass

    @abstractmethod
    async def add_permissions(self, role_id: UUID, permission_ids: Iterable[UUID]) -> None:
        """Link permissions to a role"""
        pass

    @abstractmethod
    async def get_permission_codes(self, role_id: UUID) -> List[str]:
        """Get the permission codes granted to a role"""
        pass
