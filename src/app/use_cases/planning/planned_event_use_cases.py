"""
Planned Event Use Cases

Events planned within a Lions year, and publishing them as club events.
"""

import logging
from typing import Callable
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Event, PlannedEventStatus
from src.domain.permissions import PermissionCode

from .access import authorize, load_planned_event, load_year, planned_event_dto
from .dtos import (
    DeleteResponse,
    PlannedEventCommand,
    PlannedEventInfo,
    PlannedEventListResponse,
    PublishPlannedEventResponse,
)
from .errors import ALREADY_PUBLISHED, LIONS_YEAR_ARCHIVED
from .lions_year_use_cases import build_planned_event

logger = logging.getLogger(__name__)

PUBLISHED_EVENT_TYPE = "ACTIVITY"
UPCOMING_LIMIT = 3


class AddPlannedEventUseCase:
    """Requires planning.edit; archived years are read-only"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, auth_user_id: str, year_id: UUID, command: PlannedEventCommand
    ) -> Result[PlannedEventInfo]:
        async with self.uow:
            actor, error = await authorize(self.uow, auth_user_id, PermissionCode.planning_edit)
            if error:
                return Return.err(error)

            year, error = await load_year(self.uow, actor, year_id)
            if error:
                return Return.err(error)
            if year.is_archived:
                return Return.err(LIONS_YEAR_ARCHIVED)

            built = await build_planned_event(self.uow, actor, year.id, command)
            if built.is_err():
                return Return.err(built.error)

            planned_event = built.value
            await self.uow.planned_events.create(planned_event)
            await self.uow.commit()
            return Return.ok(await planned_event_dto(self.uow, planned_event, {}))


class UpdatePlannedEventUseCase:
    """Requires planning.edit; only fields present in the command change"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, auth_user_id: str, planned_event_id: UUID, command: PlannedEventCommand
    ) -> Result[PlannedEventInfo]:
        async with self.uow:
            actor, error = await authorize(self.uow, auth_user_id, PermissionCode.planning_edit)
            if error:
                return Return.err(error)

            planned_event, year, error = await load_planned_event(
                self.uow, actor, planned_event_id
            )
            if error:
                return Return.err(error)
            if year.is_archived:
                return Return.err(LIONS_YEAR_ARCHIVED)

            # Merge onto the stored values, then validate like a new event
            merged = PlannedEventCommand(
                title=planned_event.title,
                description=planned_event.description,
                date=planned_event.date,
                end_date=planned_event.end_date,
                category_id=planned_event.category_id,
                is_mandatory=planned_event.is_mandatory,
                invitation_text=planned_event.invitation_text,
            ).model_copy(update=command.model_dump(exclude_unset=True, exclude={"status"}))
            built = await build_planned_event(self.uow, actor, year.id, merged)
            if built.is_err():
                return Return.err(built.error)

            for name in (
                "title",
                "description",
                "date",
                "end_date",
                "category_id",
                "is_mandatory",
                "invitation_text",
            ):
                setattr(planned_event, name, getattr(built.value, name))
            if command.status is not None:
                planned_event.status = command.status
            planned_event.updated_at = utcnow()

            await self.uow.planned_events.update(planned_event)
            await self.uow.commit()
            return Return.ok(await planned_event_dto(self.uow, planned_event, {}))


class DeletePlannedEventUseCase:
    """Requires planning.edit; an already published event stays in the calendar"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth_user_id: str, planned_event_id: UUID) -> Result[DeleteResponse]:
        async with self.uow:
            actor, error = await authorize(self.uow, auth_user_id, PermissionCode.planning_edit)
            if error:
                return Return.err(error)

            planned_event, year, error = await load_planned_event(
                self.uow, actor, planned_event_id
            )
            if error:
                return Return.err(error)
            if year.is_archived:
                return Return.err(LIONS_YEAR_ARCHIVED)

            await self.uow.planned_events.delete(planned_event)
            await self.uow.commit()
            return Return.ok(DeleteResponse())


class PublishPlannedEventUseCase:
    """
    Use case for turning a planned event into a club event.

    Business Rules:
    - Requires planning.edit
    - A planned event is published at most once
    - The new event is an unpublished ACTIVITY draft owned by the actor,
      so the editor can complete it before members see it
    - The planned event is marked CONFIRMED and linked to the new event
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, auth_user_id: str, planned_event_id: UUID
    ) -> Result[PublishPlannedEventResponse]:
        async with self.uow:
            actor, error = await authorize(self.uow, auth_user_id, PermissionCode.planning_edit)
            if error:
                return Return.err(error)

            planned_event, _, error = await load_planned_event(self.uow, actor, planned_event_id)
            if error:
                return Return.err(error)
            if planned_event.published_event_id is not None:
                return Return.err(ALREADY_PUBLISHED)

            event = Event(
                tenant_id=actor.tenant_id,
                title=planned_event.title,
                description=planned_event.description or "",
                start_date=planned_event.date,
                end_date=planned_event.end_date,
                type=PUBLISHED_EVENT_TYPE,
                is_published=False,
                category_id=planned_event.category_id,
                created_by_id=actor.id,
            )
            await self.uow.events.create(event)

            planned_event.published_event_id = event.id
            planned_event.status = PlannedEventStatus.confirmed
            planned_event.updated_at = utcnow()
            await self.uow.planned_events.update(planned_event)
            await self.uow.commit()
            logger.info(f"Planned event {planned_event.id} published as event {event.id}")

            return Return.ok(PublishPlannedEventResponse(published_event_id=event.id))


class ListUpcomingPlannedEventsUseCase:
    """Requires planning.read; next non-cancelled events of the active year"""

    def __init__(self, uow: UnitOfWork, now: Callable = utcnow):
        self.uow = uow
        self.now = now

    async def execute(
        self, auth_user_id: str, limit: int = UPCOMING_LIMIT
    ) -> Result[PlannedEventListResponse]:
        async with self.uow:
            actor, error = await authorize(self.uow, auth_user_id, PermissionCode.planning_read)
            if error:
                return Return.err(error)

            planned_events = await self.uow.planned_events.list_upcoming(
                actor.tenant_id, self.now(), limit
            )
            categories = {}
            return Return.ok(
                PlannedEventListResponse(
                    events=[
                        await planned_event_dto(self.uow, event, categories)
                        for event in planned_events
                    ]
                )
            )
