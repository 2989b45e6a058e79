from typing import Callable, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.repositories.event_repository import EventFilter
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import EventVisibility

from .access import category_info
from .dtos import PublicEvent, PublicEventsResponse

PAST_EVENTS_LIMIT = 10


class ListPublicEventsUseCase:
    """
    Events for a club's public website.

    Only published events with public visibility. Upcoming events exclude
    cancelled ones; past events are the latest ten.
    """

    def __init__(self, uow: UnitOfWork, now: Callable = utcnow):
        self.uow = uow
        self.now = now

    async def execute(
        self,
        tenant_id: UUID,
        upcoming_limit: Optional[int] = None,
        include_past: bool = True,
    ) -> Result[PublicEventsResponse]:
        now = self.now()
        async with self.uow:
            upcoming = await self.uow.events.list_for_tenant(
                tenant_id,
                EventFilter(
                    published_only=True,
                    visibilities=(EventVisibility.public,),
                    exclude_cancelled=True,
                    start_from=now,
                    limit=upcoming_limit,
                ),
            )
            past = []
            if include_past:
                past = await self.uow.events.list_for_tenant(
                    tenant_id,
                    EventFilter(
                        published_only=True,
                        visibilities=(EventVisibility.public,),
                        start_before=now,
                        descending=True,
                        limit=PAST_EVENTS_LIMIT,
                    ),
                )

            categories = {}

            async def to_public(event) -> PublicEvent:
                return PublicEvent(
                    id=event.id,
                    title=event.title,
                    title_en=event.title_en,
                    description=event.description,
                    description_en=event.description_en,
                    type=event.type,
                    start_date=event.start_date,
                    end_date=event.end_date,
                    location=event.location,
                    location_url=event.location_url,
                    is_online=event.is_online,
                    is_cancelled=event.is_cancelled,
                    category=await category_info(self.uow, event, categories),
                )

            return Return.ok(
                PublicEventsResponse(
                    upcoming=[await to_public(e) for e in upcoming],
                    past=[await to_public(e) for e in past],
                )
            )
