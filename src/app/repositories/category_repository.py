from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import EventCategory


class ICategoryRepository(ABC):
    """Event category repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, category_id: UUID) -> Optional[EventCategory]:
        """Get category by ID"""
        pass

    @abstractmethod
    async def get_by_tenant_and_name(self, tenant_id: UUID, name: str) -> Optional[EventCategory]:
        """Get a club's category by exact name"""
        pass

    @abstractmethod
    async def list_for_tenant(self, tenant_id: UUID) -> List[EventCategory]:
        """List a club's categories by sort order, then name"""
        pass

    @abstractmethod
    async def max_sort_order(self, tenant_id: UUID) -> int:
        """Highest sort order in use, 0 when the club has no categories"""
        pass

    @abstractmethod
    async def count_events(self, category_id: UUID) -> int:
        """Count events assigned to the category"""
        pass

    @abstractmethod
    async def create(self, category: EventCategory) -> EventCategory:
        """Create a new category"""
        pass

    @abstractmethod
    async def update(self, category: EventCategory) -> EventCategory:
        """Update existing category"""
        pass

    @abstractmethod
    async def delete(self, category: EventCategory) -> None:
        """Delete a category"""
        pass
