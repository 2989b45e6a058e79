from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from src.domain.entities import Event, EventVisibility


@dataclass
class EventFilter:
    """Query options for tenant event listings"""

    published_only: bool = True
    start_from: Optional[datetime] = None
    start_before: Optional[datetime] = None
    visibilities: Sequence[EventVisibility] = field(default_factory=tuple)
    exclude_cancelled: bool = False
    descending: bool = False
    limit: Optional[int] = None


class IEventRepository(ABC):
    """Event repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID"""
        pass

    @abstractmethod
    async def list_for_tenant(self, tenant_id: UUID, event_filter: EventFilter) -> List[Event]:
        """List a tenant's events"""
        pass

    @abstractmethod
    async def create(self, event: Event) -> Event:
        """Create a new event"""
        pass

    @abstractmethod
    async def update(self, event: Event) -> Event:
        """Update existing event"""
        pass

    @abstractmethod
    async def reassign_creator(self, from_member_id: UUID, to_member_id: UUID) -> int:
        """Transfer ownership of every event created by a member"""
        pass
