from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import LionsYear


class ILionsYearRepository(ABC):
    """Lions year repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, year_id: UUID) -> Optional[LionsYear]:
        """Get Lions year by ID"""
        pass

    @abstractmethod
    async def list_for_tenant(self, tenant_id: UUID) -> List[LionsYear]:
        """List a club's Lions years, latest start first"""
        pass

    @abstractmethod
    async def archive_active(self, tenant_id: UUID, except_id: Optional[UUID] = None) -> int:
        """Archive the club's active years other than except_id"""
        pass

    @abstractmethod
    async def create(self, year: LionsYear) -> LionsYear:
        """Create a new Lions year"""
        pass

    @abstractmethod
    async def update(self, year: LionsYear) -> LionsYear:
        """Update existing Lions year"""
        pass

    @abstractmethod
    async def delete(self, year: LionsYear) -> None:
        """Delete a Lions year"""
        pass
