"""
Create/Update Event Use Cases
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.permission_evaluator import PermissionEvaluator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import (
    EVENTS_FEATURE,
    MEMBER_NOT_FOUND,
    load_actor,
    require_feature,
)
from src.domain.base import to_naive_utc, utcnow
from src.domain.entities import Event, Member
from src.domain.permissions import PermissionCode

from .access import category_info
from .dtos import EventCommand, EventDetail
from .errors import CATEGORY_NOT_FOUND, EVENT_NOT_FOUND, FORBIDDEN, INVALID_DATES
from .get_event_use_case import event_detail, registration_infos

logger = logging.getLogger(__name__)

DATE_FIELDS = ("start_date", "end_date", "registration_deadline")

# Columns without a NULL state; an explicit null leaves them unchanged
REQUIRED_FIELDS = (
    "title",
    "description",
    "type",
    "start_date",
    "is_online",
    "registration_required",
    "allow_guests",
    "max_guests_per_member",
    "cost_member",
    "cost_guest",
    "visibility",
    "is_published",
    "is_cancelled",
)


def _changes(command: EventCommand) -> dict:
    changes = {}
    for name, value in command.model_dump(exclude_unset=True).items():
        if value is None and name in REQUIRED_FIELDS:
            continue
        if name in DATE_FIELDS:
            value = to_naive_utc(value)
        if isinstance(value, str) and name != "description":
            value = value.strip() or None
        changes[name] = value
    return changes


async def _validate(uow: UnitOfWork, actor: Member, event: Event):
    if not (event.title or "").strip():
        return Error("TITLE_REQUIRED", "Titel ist erforderlich")
    if event.end_date is not None and not event.start_date < event.end_date:
        return INVALID_DATES
    if event.category_id is not None:
        category = await uow.categories.get_by_id(event.category_id)
        if category is None or category.tenant_id != actor.tenant_id:
            return CATEGORY_NOT_FOUND
    return None


class CreateEventUseCase:
    """Requires events.create; start must precede end"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth_user_id: str, command: EventCommand) -> Result[EventDetail]:
        changes = _changes(command)
        if not changes.get("title"):
            return Return.err(Error("TITLE_REQUIRED", "Titel ist erforderlich"))
        if changes.get("start_date") is None:
            return Return.err(Error("START_REQUIRED", "Beginn ist erforderlich"))

        async with self.uow:
            actor = await load_actor(self.uow, auth_user_id)
            if actor is None:
                return Return.err(MEMBER_NOT_FOUND)

            error = await require_feature(self.uow, actor.tenant_id, EVENTS_FEATURE)
            if error:
                return Return.err(error)

            permissions = await PermissionEvaluator(self.uow).permissions_for(actor)
            if not permissions.has(PermissionCode.events_create):
                return Return.err(FORBIDDEN)

            event = Event(tenant_id=actor.tenant_id, created_by_id=actor.id, **changes)
            error = await _validate(self.uow, actor, event)
            if error:
                return Return.err(error)

            await self.uow.events.create(event)
            await self.uow.commit()
            logger.info(f"Event created: {event.id} ({event.title})")

            category = await category_info(self.uow, event, {})
            return Return.ok(event_detail(event, category, []))


class UpdateEventUseCase:
    """Requires events.edit; only fields present in the command change"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, auth_user_id: str, event_id: UUID, command: EventCommand
    ) -> Result[EventDetail]:
        changes = _changes(command)

        async with self.uow:
            actor = await load_actor(self.uow, auth_user_id)
            if actor is None:
                return Return.err(MEMBER_NOT_FOUND)

            error = await require_feature(self.uow, actor.tenant_id, EVENTS_FEATURE)
            if error:
                return Return.err(error)

            permissions = await PermissionEvaluator(self.uow).permissions_for(actor)
            if not permissions.has(PermissionCode.events_edit):
                return Return.err(FORBIDDEN)

            event = await self.uow.events.get_by_id(event_id)
            if event is None or event.tenant_id != actor.tenant_id:
                return Return.err(EVENT_NOT_FOUND)

            for name, value in changes.items():
                setattr(event, name, value)
            event.updated_at = utcnow()

            error = await _validate(self.uow, actor, event)
            if error:
                return Return.err(error)

            await self.uow.events.update(event)
            await self.uow.commit()

            category = await category_info(self.uow, event, {})
            registrations = await registration_infos(
                self.uow, await self.uow.registrations.get_by_event_id(event.id)
            )
            return Return.ok(event_detail(event, category, registrations))
