from typing import List
from uuid import UUID

from libs.result import Result, Return
from src.app.services.permission_evaluator import PermissionEvaluator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import (
    EVENTS_FEATURE,
    MEMBER_NOT_FOUND,
    load_actor,
    require_feature,
)
from src.domain.entities import Event, EventRegistration

from .access import category_info, event_summary, visible_tiers
from .dtos import EventCategoryInfo, EventDetail, RegistrationInfo
from .errors import EVENT_NOT_FOUND


async def registration_infos(
    uow: UnitOfWork, registrations: List[EventRegistration]
) -> List[RegistrationInfo]:
    infos = []
    for registration in registrations:
        member = await uow.members.get_by_id(registration.member_id)
        infos.append(
            RegistrationInfo(
                id=registration.id,
                member_id=registration.member_id,
                member_name=member.full_name if member else "",
                status=registration.status,
                guest_count=registration.guest_count,
                guest_names=list(registration.guest_names or []),
                is_paid=registration.is_paid,
                total_cost=registration.total_cost,
            )
        )
    return infos


def event_detail(
    event: Event, category: EventCategoryInfo, registrations: List[RegistrationInfo]
) -> EventDetail:
    summary = event_summary(event, category, len(registrations))
    return EventDetail(
        **summary.model_dump(),
        description=event.description,
        description_en=event.description_en,
        location_url=event.location_url,
        online_url=event.online_url,
        registration_deadline=event.registration_deadline,
        allow_guests=event.allow_guests,
        max_guests_per_member=event.max_guests_per_member,
        cost_member=event.cost_member,
        cost_guest=event.cost_guest,
        is_published=event.is_published,
        created_by_id=event.created_by_id,
        registrations=registrations,
    )


class GetEventUseCase:
    """One event of the member's club with its registrations"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, auth_user_id: str, event_id: UUID) -> Result[EventDetail]:
        async with self.uow:
            actor = await load_actor(self.uow, auth_user_id)
            if actor is None:
                return Return.err(MEMBER_NOT_FOUND)

            error = await require_feature(self.uow, actor.tenant_id, EVENTS_FEATURE)
            if error:
                return Return.err(error)

            event = await self.uow.events.get_by_id(event_id)
            if event is None or event.tenant_id != actor.tenant_id:
                return Return.err(EVENT_NOT_FOUND)

            evaluator = PermissionEvaluator(self.uow)
            tiers = visible_tiers(
                await evaluator.role_type_of(actor), await evaluator.permissions_for(actor)
            )
            if event.visibility not in tiers:
                return Return.err(EVENT_NOT_FOUND)

            category = await category_info(self.uow, event, {})
            registrations = await registration_infos(
                self.uow, await self.uow.registrations.get_by_event_id(event.id)
            )
            return Return.ok(event_detail(event, category, registrations))
