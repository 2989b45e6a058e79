from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.event_repository import EventFilter, IEventRepository
from src.domain.entities import Event

from .base import flush


class EventRepository(IEventRepository):
    """Event repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID"""
        stmt = select(Event).where(Event.id == event_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_tenant(self, tenant_id: UUID, event_filter: EventFilter) -> List[Event]:
        """List a tenant's events"""
        stmt = select(Event).where(Event.tenant_id == tenant_id)
        if event_filter.published_only:
            stmt = stmt.where(Event.is_published == True)  # noqa: E712
        if event_filter.exclude_cancelled:
            stmt = stmt.where(Event.is_cancelled == False)  # noqa: E712
        if event_filter.start_from is not None:
            stmt = stmt.where(Event.start_date >= event_filter.start_from)
        if event_filter.start_before is not None:
            stmt = stmt.where(Event.start_date < event_filter.start_before)
        if event_filter.visibilities:
            stmt = stmt.where(Event.visibility.in_(list(event_filter.visibilities)))

        order = Event.start_date.desc() if event_filter.descending else Event.start_date.asc()
        stmt = stmt.order_by(order)
        if event_filter.limit is not None:
            stmt = stmt.limit(event_filter.limit)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, event: Event) -> Event:
        """Create a new event"""
        self.session.add(event)
        await flush(self.session)
        await self.session.refresh(event)
        return event

    async def update(self, event: Event) -> Event:
        """Update existing event"""
        self.session.add(event)
        await flush(self.session)
        await self.session.refresh(event)
        return event

    async def reassign_creator(self, from_member_id: UUID, to_member_id: UUID) -> int:
        """Transfer ownership of every event created by a member"""
        stmt = (
            update(Event)
            .where(Event.created_by_id == from_member_id)
            .values(created_by_id=to_member_id)
        )
        result = await self.session.execute(stmt)
        return result.rowcount
