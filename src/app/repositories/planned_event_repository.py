from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from src.domain.entities import PlannedEvent


class IPlannedEventRepository(ABC):
    """Planned event repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, planned_event_id: UUID) -> Optional[PlannedEvent]:
        """Get planned event by ID"""
        pass

    @abstractmethod
    async def get_by_year_id(
        self, year_id: UUID, exclude_cancelled: bool = False
    ) -> List[PlannedEvent]:
        """Get a Lions year's planned events, earliest first"""
        pass

    @abstractmethod
    async def list_upcoming(
        self, tenant_id: UUID, start_from: datetime, limit: int
    ) -> List[PlannedEvent]:
        """Next non-cancelled planned events of the club's active year"""
        pass

    @abstractmethod
    async def count_by_year_ids(self, year_ids: Sequence[UUID]) -> Dict[UUID, int]:
        """Count planned events per Lions year"""
        pass

    @abstractmethod
    async def count_by_category(self, category_id: UUID) -> int:
        """Count planned events assigned to a category"""
        pass

    @abstractmethod
    async def create(self, planned_event: PlannedEvent) -> PlannedEvent:
        """Create a new planned event"""
        pass

    @abstractmethod
    async def update(self, planned_event: PlannedEvent) -> PlannedEvent:
        """Update existing planned event"""
        pass

    @abstractmethod
    async def delete(self, planned_event: PlannedEvent) -> None:
        """Delete a planned event"""
        pass

    @abstractmethod
    async def delete_by_year(self, year_id: UUID) -> int:
        """Delete every planned event of a Lions year"""
        pass
