from typing import Callable

from libs.result import Error, Result, Return
from src.app.repositories.event_repository import EventFilter
from src.app.services.permission_evaluator import PermissionEvaluator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import (
    EVENTS_FEATURE,
    MEMBER_NOT_FOUND,
    load_actor,
    require_feature,
)
from src.domain.base import utcnow

from .access import category_info, event_summary, visible_tiers
from .dtos import EventListResponse

EVENT_LIST_FILTERS = ("upcoming", "past", "all")


class ListEventsUseCase:
    """
    Published events of the member's club.

    Filters:
    - upcoming: start >= now, soonest first
    - past: start < now, latest first
    - all: every published event, ascending
    """

    def __init__(self, uow: UnitOfWork, now: Callable = utcnow):
        self.uow = uow
        self.now = now

    async def execute(self, auth_user_id: str, filter: str = "upcoming") -> Result[EventListResponse]:
        if filter not in EVENT_LIST_FILTERS:
            return Return.err(Error("INVALID_FILTER", f"Ungültiger Filter: {filter}"))

        async with self.uow:
            actor = await load_actor(self.uow, auth_user_id)
            if actor is None:
                return Return.err(MEMBER_NOT_FOUND)

            error = await require_feature(self.uow, actor.tenant_id, EVENTS_FEATURE)
            if error:
                return Return.err(error)

            evaluator = PermissionEvaluator(self.uow)
            permissions = await evaluator.permissions_for(actor)
            role_type = await evaluator.role_type_of(actor)

            now = self.now()
            event_filter = EventFilter(
                published_only=True,
                visibilities=tuple(visible_tiers(role_type, permissions)),
            )
            if filter == "upcoming":
                event_filter.start_from = now
            elif filter == "past":
                event_filter.start_before = now
                event_filter.descending = True

            events = await self.uow.events.list_for_tenant(actor.tenant_id, event_filter)
            counts = await self.uow.registrations.count_by_event_ids([e.id for e in events])

            categories = {}
            summaries = []
            for event in events:
                category = await category_info(self.uow, event, categories)
                summaries.append(event_summary(event, category, counts.get(event.id, 0)))

            return Return.ok(EventListResponse(events=summaries))
