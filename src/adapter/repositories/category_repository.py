from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.category_repository import ICategoryRepository
from src.domain.entities import Event, EventCategory

from .base import flush


class CategoryRepository(ICategoryRepository):
    """Event category repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, category_id: UUID) -> Optional[EventCategory]:
        stmt = select(EventCategory).where(EventCategory.id == category_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_tenant_and_name(self, tenant_id: UUID, name: str) -> Optional[EventCategory]:
        stmt = select(EventCategory).where(
            EventCategory.tenant_id == tenant_id, EventCategory.name == name
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_tenant(self, tenant_id: UUID) -> List[EventCategory]:
        stmt = (
            select(EventCategory)
            .where(EventCategory.tenant_id == tenant_id)
            .order_by(EventCategory.sort_order, EventCategory.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def max_sort_order(self, tenant_id: UUID) -> int:
        stmt = select(func.max(EventCategory.sort_order)).where(
            EventCategory.tenant_id == tenant_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() or 0

    async def count_events(self, category_id: UUID) -> int:
        stmt = select(func.count(Event.id)).where(Event.category_id == category_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, category: EventCategory) -> EventCategory:
        self.session.add(category)
        await flush(self.session)
        await self.session.refresh(category)
        return category

    async def update(self, category: EventCategory) -> EventCategory:
        self.session.add(category)
        await flush(self.session)
        await self.session.refresh(category)
        return category

    async def delete(self, category: EventCategory) -> None:
        await self.session.delete(category)
        await flush(self.session)
