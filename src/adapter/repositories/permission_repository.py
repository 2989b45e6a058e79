from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.permission_repository import IPermissionRepository
from src.domain.entities import Permission

from .base import flush


class PermissionRepository(IPermissionRepository):
    """Permission catalog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all(self) -> List[Permission]:
        stmt = select(Permission).order_by(Permission.code)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, permission: Permission) -> Permission:
        self.session.add(permission)
        await flush(self.session)
        return permission
