from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from src.domain.entities import EventRegistration


class IRegistrationRepository(ABC):
    """Event registration repository interface - application layer"""

    @abstractmethod
    async def get_by_event_and_member(
        self, event_id: UUID, member_id: UUID
    ) -> Optional[EventRegistration]:
        """Get a member's registration for an event"""
        pass

    @abstractmethod
    async def get_by_event_id(self, event_id: UUID) -> List[EventRegistration]:
        """Get all registrations of an event"""
        pass

    @abstractmethod
    async def count_by_event_ids(self, event_ids: Sequence[UUID]) -> Dict[UUID, int]:
        """Count registrations per event"""
        pass

    @abstractmethod
    async def create(self, registration: EventRegistration) -> EventRegistration:
        """Create a new registration"""
        pass

    @abstractmethod
    async def update(self, registration: EventRegistration) -> EventRegistration:
        """Update existing registration"""
        pass

    @abstractmethod
    async def delete_by_member(self, member_id: UUID) -> int:
        """Delete every registration of a member"""
        pass
