from sqlalchemy.exc import IntegrityError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import DuplicateEntryError


async def flush(session: AsyncSession) -> None:
    """Flush pending writes, reporting constraint violations as DuplicateEntryError"""
    try:
        await session.flush()
    except IntegrityError as exc:
        raise DuplicateEntryError(str(exc.orig)) from exc
