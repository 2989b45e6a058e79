"""
Lions Year Use Cases

A Lions year runs from July 1 to June 30. Each club plans its events per year;
at most one year is active at a time.
"""

import logging
from datetime import datetime
from typing import Callable, List
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import to_naive_utc, utcnow
from src.domain.entities import LionsYear, LionsYearStatus, Member, PlannedEvent
from src.domain.permissions import PermissionCode

from .access import authorize, load_year, planned_event_dto, year_summary
from .dtos import (
    CreateLionsYearCommand,
    DeleteResponse,
    LionsYearDetail,
    LionsYearListResponse,
    LionsYearStatusCommand,
    LionsYearSummary,
    PlannedEventCommand,
)
from .errors import (
    CATEGORY_NOT_FOUND,
    DATE_REQUIRED,
    INVALID_DATES,
    LIONS_YEAR_NOT_DRAFT,
    TITLE_REQUIRED,
)

logger = logging.getLogger(__name__)

# Lions years start on July 1
START_MONTH = 7


def default_start_date(now: datetime) -> datetime:
    """July 1 of this year, or of next year once July has begun"""
    year = now.year + 1 if now.month >= START_MONTH else now.year
    return datetime(year, START_MONTH, 1)


def default_end_date(start_date: datetime) -> datetime:
    return datetime(start_date.year + 1, 6, 30)


def default_year_name(start_date: datetime) -> str:
    return f"Lionsjahr {start_date.year}/{start_date.year + 1}"


async def build_planned_event(
    uow: UnitOfWork, actor: Member, year_id: UUID, command: PlannedEventCommand
) -> Result[PlannedEvent]:
    """Validated, unsaved planned event; the category must belong to the actor's club"""
    title = (command.title or "").strip()
    if not title:
        return Return.err(TITLE_REQUIRED)
    if command.date is None:
        return Return.err(DATE_REQUIRED)

    date = to_naive_utc(command.date)
    end_date = to_naive_utc(command.end_date)
    if end_date is not None and not date < end_date:
        return Return.err(INVALID_DATES)

    category = await uow.categories.get_by_id(command.category_id) if command.category_id else None
    if category is None or category.tenant_id != actor.tenant_id:
        return Return.err(CATEGORY_NOT_FOUND)

    return Return.ok(
        PlannedEvent(
            lions_year_id=year_id,
            title=title,
            description=(command.description or "").strip() or None,
            date=date,
            end_date=end_date,
            category_id=category.id,
            is_mandatory=bool(command.is_mandatory),
            invitation_text=(command.invitation_text or "").strip() or None,
        )
    )


async def year_detail(uow: UnitOfWork, year: LionsYear) -> LionsYearDetail:
    planned_events = await uow.planned_events.get_by_year_id(year.id)
    categories = {}
    infos = [await planned_event_dto(uow, event, categories) for event in planned_events]
    summary = year_summary(year, len(infos))
    return LionsYearDetail(**summary.model_dump(), planned_events=infos)


class ListLionsYearsUseCase:
    """Requires planning.read; latest year first, with planned event counts"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth_user_id: str) -> Result[LionsYearListResponse]:
        async with self.uow:
            actor, error = await authorize(self.uow, auth_user_id, PermissionCode.planning_read)
            if error:
                return Return.err(error)

            years = await self.uow.lions_years.list_for_tenant(actor.tenant_id)
            counts = await self.uow.planned_events.count_by_year_ids([y.id for y in years])
            return Return.ok(
                LionsYearListResponse(years=[year_summary(y, counts.get(y.id, 0)) for y in years])
            )


class GetLionsYearUseCase:
    """Requires planning.read; planned events ordered by date"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth_user_id: str, year_id: UUID) -> Result[LionsYearDetail]:
        async with self.uow:
            actor, error = await authorize(self.uow, auth_user_id, PermissionCode.planning_read)
            if error:
                return Return.err(error)

            year, error = await load_year(self.uow, actor, year_id)
            if error:
                return Return.err(error)

            return Return.ok(await year_detail(self.uow, year))


class CreateLionsYearUseCase:
    """
    Use case for creating a Lions year with its planned events.

    Business Rules:
    - Requires planning.admin
    - Name and dates default to the upcoming July 1 to June 30 period
    - set_as_active archives the club's active year; otherwise the new
      year starts in PLANNING
    - Events without a category are skipped; the rest are validated and
      saved with the year in one transaction
    """

    def __init__(self, uow: UnitOfWork, now: Callable = utcnow):
        self.uow = uow
        self.now = now

    async def execute(
        self, auth_user_id: str, command: CreateLionsYearCommand
    ) -> Result[LionsYearDetail]:
        start_date = to_naive_utc(command.start_date) or default_start_date(self.now())
        end_date = to_naive_utc(command.end_date) or default_end_date(start_date)
        if not start_date < end_date:
            return Return.err(INVALID_DATES)
        name = (command.name or "").strip() or default_year_name(start_date)

        async with self.uow:
            actor, error = await authorize(self.uow, auth_user_id, PermissionCode.planning_admin)
            if error:
                return Return.err(error)

            year = LionsYear(
                tenant_id=actor.tenant_id,
                name=name,
                start_date=start_date,
                end_date=end_date,
                status=LionsYearStatus.active if command.set_as_active else LionsYearStatus.planning,
            )

            planned_events: List[PlannedEvent] = []
            for event_command in command.events:
                if event_command.category_id is None:
                    logger.debug(f"Skipping planned event without category: {event_command.title}")
                    continue
                built = await build_planned_event(self.uow, actor, year.id, event_command)
                if built.is_err():
                    return Return.err(built.error)
                planned_events.append(built.value)

            if command.set_as_active:
                archived = await self.uow.lions_years.archive_active(actor.tenant_id)
                if archived:
                    logger.info(f"Archived {archived} active Lions year(s) of tenant {actor.tenant_id}")

            await self.uow.lions_years.create(year)
            for planned_event in planned_events:
                await self.uow.planned_events.create(planned_event)
            await self.uow.commit()
            logger.info(f"Lions year created: {year.id} ({year.name}, {len(planned_events)} events)")

            return Return.ok(await year_detail(self.uow, year))


class UpdateLionsYearStatusUseCase:
    """Requires planning.admin; activating a year archives the other active year"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, auth_user_id: str, year_id: UUID, command: LionsYearStatusCommand
    ) -> Result[LionsYearSummary]:
        async with self.uow:
            actor, error = await authorize(self.uow, auth_user_id, PermissionCode.planning_admin)
            if error:
                return Return.err(error)

            year, error = await load_year(self.uow, actor, year_id)
            if error:
                return Return.err(error)

            if command.status == LionsYearStatus.active:
                await self.uow.lions_years.archive_active(actor.tenant_id, except_id=year.id)

            year.status = command.status
            year.updated_at = utcnow()
            await self.uow.lions_years.update(year)
            await self.uow.commit()

            counts = await self.uow.planned_events.count_by_year_ids([year.id])
            return Return.ok(year_summary(year, counts.get(year.id, 0)))


class DeleteLionsYearUseCase:
    """Requires planning.admin; only DRAFT years, together with their planned events"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth_user_id: str, year_id: UUID) -> Result[DeleteResponse]:
        async with self.uow:
            actor, error = await authorize(self.uow, auth_user_id, PermissionCode.planning_admin)
            if error:
                return Return.err(error)

            year, error = await load_year(self.uow, actor, year_id)
            if error:
                return Return.err(error)

            if year.status != LionsYearStatus.draft:
                return Return.err(LIONS_YEAR_NOT_DRAFT)

            removed = await self.uow.planned_events.delete_by_year(year.id)
            await self.uow.lions_years.delete(year)
            await self.uow.commit()
            logger.info(f"Lions year deleted: {year.id} ({year.name}, {removed} planned events)")
            return Return.ok(DeleteResponse())
