from typing import List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.lions_year_repository import ILionsYearRepository
from src.domain.base import utcnow
from src.domain.entities import LionsYear, LionsYearStatus

from .base import flush


class LionsYearRepository(ILionsYearRepository):
    """Lions year repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, year_id: UUID) -> Optional[LionsYear]:
        stmt = select(LionsYear).where(LionsYear.id == year_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_tenant(self, tenant_id: UUID) -> List[LionsYear]:
        stmt = (
            select(LionsYear)
            .where(LionsYear.tenant_id == tenant_id)
            .order_by(LionsYear.start_date.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def archive_active(self, tenant_id: UUID, except_id: Optional[UUID] = None) -> int:
        stmt = update(LionsYear).where(
            LionsYear.tenant_id == tenant_id,
            LionsYear.status == LionsYearStatus.active,
        )
        if except_id is not None:
            stmt = stmt.where(LionsYear.id != except_id)
        stmt = stmt.values(status=LionsYearStatus.archived, updated_at=utcnow())
        result = await self.session.execute(stmt)
        return result.rowcount

    async def create(self, year: LionsYear) -> LionsYear:
        self.session.add(year)
        await flush(self.session)
        await self.session.refresh(year)
        return year

    async def update(self, year: LionsYear) -> LionsYear:
        self.session.add(year)
        await flush(self.session)
        await self.session.refresh(year)
        return year

    async def delete(self, year: LionsYear) -> None:
        await self.session.delete(year)
        await flush(self.session)
