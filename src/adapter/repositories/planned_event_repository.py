from datetime import datetime
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from sqlalchemy import delete, func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.planned_event_repository import IPlannedEventRepository
from src.domain.entities import LionsYear, LionsYearStatus, PlannedEvent, PlannedEventStatus

from .base import flush


class PlannedEventRepository(IPlannedEventRepository):
    """Planned event repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, planned_event_id: UUID) -> Optional[PlannedEvent]:
        stmt = select(PlannedEvent).where(PlannedEvent.id == planned_event_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_year_id(
        self, year_id: UUID, exclude_cancelled: bool = False
    ) -> List[PlannedEvent]:
        stmt = select(PlannedEvent).where(PlannedEvent.lions_year_id == year_id)
        if exclude_cancelled:
            stmt = stmt.where(PlannedEvent.status != PlannedEventStatus.cancelled)
        stmt = stmt.order_by(PlannedEvent.date)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_upcoming(
        self, tenant_id: UUID, start_from: datetime, limit: int
    ) -> List[PlannedEvent]:
        stmt = (
            select(PlannedEvent)
            .join(LionsYear, LionsYear.id == PlannedEvent.lions_year_id)
            .where(
                LionsYear.tenant_id == tenant_id,
                LionsYear.status == LionsYearStatus.active,
                PlannedEvent.date >= start_from,
                PlannedEvent.status != PlannedEventStatus.cancelled,
            )
            .order_by(PlannedEvent.date)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_year_ids(self, year_ids: Sequence[UUID]) -> Dict[UUID, int]:
        if not year_ids:
            return {}
        stmt = (
            select(PlannedEvent.lions_year_id, func.count(PlannedEvent.id))
            .where(PlannedEvent.lions_year_id.in_(list(year_ids)))
            .group_by(PlannedEvent.lions_year_id)
        )
        result = await self.session.execute(stmt)
        return {year_id: count for year_id, count in result.all()}

    async def count_by_category(self, category_id: UUID) -> int:
        stmt = select(func.count(PlannedEvent.id)).where(PlannedEvent.category_id == category_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, planned_event: PlannedEvent) -> PlannedEvent:
        self.session.add(planned_event)
        await flush(self.session)
        await self.session.refresh(planned_event)
        return planned_event

    async def update(self, planned_event: PlannedEvent) -> PlannedEvent:
        self.session.add(planned_event)
        await flush(self.session)
        await self.session.refresh(planned_event)
        return planned_event

    async def delete(self, planned_event: PlannedEvent) -> None:
        await self.session.delete(planned_event)
        await flush(self.session)

    async def delete_by_year(self, year_id: UUID) -> int:
        stmt = delete(PlannedEvent).where(PlannedEvent.lions_year_id == year_id)
        result = await self.session.execute(stmt)
        return result.rowcount
