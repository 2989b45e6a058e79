"""
Register For Event Use Case

Creates or updates the signed-in member's response to an event.
"""

from decimal import Decimal
from typing import Callable
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateEntryError
from src.app.services.permission_evaluator import PermissionEvaluator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import (
    EVENTS_FEATURE,
    MEMBER_NOT_FOUND,
    load_actor,
    require_feature,
)
from src.domain.base import utcnow
from src.domain.entities import Event, EventRegistration, RegistrationStatus
from src.domain.permissions import PermissionCode

from .access import visible_tiers
from .dtos import RegistrationCommand, RegistrationInfo
from .errors import EVENT_NOT_FOUND, FORBIDDEN


def total_cost_for(event: Event, status: RegistrationStatus, guest_count: int) -> Decimal:
    """Member price plus guests, charged only for a firm registration"""
    if status != RegistrationStatus.registered:
        return Decimal("0")
    return Decimal(event.cost_member) + guest_count * Decimal(event.cost_guest)


class RegisterForEventUseCase:
    """
    Business Rules:
    - Requires events.register and an event visible to the member
    - Cancelled events and passed deadlines reject registrations
    - Guests only when the event allows them, up to max_guests_per_member
    - total_cost is computed at write time
    - max_participants is advisory and not enforced
    """

    def __init__(self, uow: UnitOfWork, now: Callable = utcnow):
        self.uow = uow
        self.now = now

    async def execute(
        self, auth_user_id: str, event_id: UUID, command: RegistrationCommand
    ) -> Result[RegistrationInfo]:
        async with self.uow:
            actor = await load_actor(self.uow, auth_user_id)
            if actor is None:
                return Return.err(MEMBER_NOT_FOUND)

            error = await require_feature(self.uow, actor.tenant_id, EVENTS_FEATURE)
            if error:
                return Return.err(error)

            evaluator = PermissionEvaluator(self.uow)
            permissions = await evaluator.permissions_for(actor)
            if not permissions.has(PermissionCode.events_register):
                return Return.err(FORBIDDEN)

            event = await self.uow.events.get_by_id(event_id)
            if event is None or event.tenant_id != actor.tenant_id:
                return Return.err(EVENT_NOT_FOUND)
            role_type = await evaluator.role_type_of(actor)
            if event.visibility not in visible_tiers(role_type, permissions):
                return Return.err(EVENT_NOT_FOUND)

            if event.is_cancelled:
                return Return.err(
                    Error("EVENT_CANCELLED", "Diese Veranstaltung wurde abgesagt")
                )

            now = self.now()
            if event.registration_deadline is not None and now > event.registration_deadline:
                return Return.err(
                    Error("REGISTRATION_CLOSED", "Die Anmeldefrist ist abgelaufen")
                )

            if command.guest_count > 0:
                if not event.allow_guests:
                    return Return.err(
                        Error("GUESTS_NOT_ALLOWED", "Für diese Veranstaltung sind keine Gäste erlaubt")
                    )
                if command.guest_count > event.max_guests_per_member:
                    return Return.err(
                        Error(
                            "TOO_MANY_GUESTS",
                            f"Maximal {event.max_guests_per_member} Gäste pro Mitglied",
                        )
                    )
            if len(command.guest_names) > command.guest_count:
                return Return.err(
                    Error("INVALID_GUEST_NAMES", "Mehr Gastnamen als angemeldete Gäste")
                )

            registration = await self.uow.registrations.get_by_event_and_member(
                event.id, actor.id
            )
            if registration is None:
                registration = EventRegistration(event_id=event.id, member_id=actor.id)
                is_new = True
            else:
                is_new = False

            registration.status = command.status
            registration.guest_count = command.guest_count
            registration.guest_names = [name.strip() for name in command.guest_names]
            registration.total_cost = total_cost_for(event, command.status, command.guest_count)
            registration.updated_at = now

            try:
                if is_new:
                    await self.uow.registrations.create(registration)
                else:
                    await self.uow.registrations.update(registration)
                await self.uow.commit()
            except DuplicateEntryError:
                return Return.err(
                    Error(
                        "REGISTRATION_CONFLICT",
                        "Die Anmeldung wurde gleichzeitig geändert. Bitte erneut versuchen.",
                    )
                )

            return Return.ok(
                RegistrationInfo(
                    id=registration.id,
                    member_id=actor.id,
                    member_name=actor.full_name,
                    status=registration.status,
                    guest_count=registration.guest_count,
                    guest_names=list(registration.guest_names),
                    is_paid=registration.is_paid,
                    total_cost=registration.total_cost,
                )
            )
