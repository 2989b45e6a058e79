from typing import Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.registration_repository import IRegistrationRepository
from src.domain.entities import EventRegistration

from .base import flush


class RegistrationRepository(IRegistrationRepository):
    """Event registration repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_event_and_member(
        self, event_id: UUID, member_id: UUID
    ) -> Optional[EventRegistration]:
        stmt = select(EventRegistration).where(
            EventRegistration.event_id == event_id,
            EventRegistration.member_id == member_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_event_id(self, event_id: UUID) -> List[EventRegistration]:
        stmt = (
            select(EventRegistration)
            .where(EventRegistration.event_id == event_id)
            .order_by(EventRegistration.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_event_ids(self, event_ids: Sequence[UUID]) -> Dict[UUID, int]:
        if not event_ids:
            return {}
        stmt = (
            select(EventRegistration.event_id, func.count(EventRegistration.id))
            .where(EventRegistration.event_id.in_(list(event_ids)))
            .group_by(EventRegistration.event_id)
        )
        result = await self.session.execute(stmt)
        return {event_id: count for event_id, count in result.all()}

    async def create(self, registration: EventRegistration) -> EventRegistration:
        self.session.add(registration)
        await flush(self.session)
        await self.session.refresh(registration)
        return registration

    async def update(self, registration: EventRegistration) -> EventRegistration:
        self.session.add(registration)
        await flush(self.session)
        await self.session.refresh(registration)
        return registration

    async def delete_by_member(self, member_id: UUID) -> int:
        stmt = delete(EventRegistration).where(EventRegistration.member_id == member_id)
        result = await self.session.execute(stmt)
        return result.rowcount
