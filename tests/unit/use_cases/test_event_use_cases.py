from datetime import timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from src.app.use_cases.events import (
    ListEventsUseCase,
    RegisterForEventUseCase,
    RegistrationCommand,
    total_cost_for,
)
from src.app.use_cases.events.access import visible_tiers
from src.domain.entities import Event, EventVisibility, RegistrationStatus, RoleType
from src.domain.permissions import PermissionSet
from tests.unit.factories import NOW, grant_role, make_member, make_role


def make_event(tenant, creator, **overrides) -> Event:
    values = dict(
        id=uuid4(),
        tenant_id=tenant.id,
        title="Clubabend",
        start_date=NOW + timedelta(days=3),
        visibility=EventVisibility.members,
        created_by_id=creator.id,
        cost_member=Decimal("25.00"),
        cost_guest=Decimal("30.00"),
        allow_guests=True,
        max_guests_per_member=2,
    )
    values.update(overrides)
    return Event(**values)


@pytest.fixture
def member(mock_uow, tenant):
    role = make_role(tenant, RoleType.member)
    member = make_member(tenant, role)
    grant_role(mock_uow, (member, role))
    mock_uow.members.get_by_auth_user_id.return_value = member
    mock_uow.registrations.get_by_event_and_member.return_value = None
    return member


def _register(mock_uow):
    return RegisterForEventUseCase(mock_uow, now=lambda: NOW)


def test_total_cost_counts_member_and_guests():
    event = Event(title="x", start_date=NOW, created_by_id=uuid4(), cost_member=Decimal("25"), cost_guest=Decimal("30"))

    assert total_cost_for(event, RegistrationStatus.registered, 2) == Decimal("85")
    assert total_cost_for(event, RegistrationStatus.maybe, 2) == Decimal("0")
    assert total_cost_for(event, RegistrationStatus.declined, 0) == Decimal("0")


def test_visible_tiers():
    everything = PermissionSet.from_codes(["events.read.all"])
    nothing = PermissionSet()

    assert visible_tiers(RoleType.guest, nothing) == [EventVisibility.public]
    assert visible_tiers(RoleType.member, everything) == [
        EventVisibility.public,
        EventVisibility.members,
    ]
    assert visible_tiers(RoleType.board, nothing) == [
        EventVisibility.public,
        EventVisibility.members,
        EventVisibility.board,
    ]


@pytest.mark.asyncio
async def test_register_with_guests(mock_uow, tenant, member):
    event = make_event(tenant, member)
    mock_uow.events.get_by_id.return_value = event

    result = await _register(mock_uow).execute(
        member.auth_user_id,
        event.id,
        RegistrationCommand(guest_count=2, guest_names=[" Eva ", "Tom"]),
    )

    assert result.is_ok()
    info = result.value
    assert info.total_cost == Decimal("85.00")
    assert info.guest_names == ["Eva", "Tom"]
    mock_uow.registrations.create.assert_called_once()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_existing_registration_is_updated(mock_uow, tenant, member):
    event = make_event(tenant, member)
    mock_uow.events.get_by_id.return_value = event
    first = await _register(mock_uow).execute(member.auth_user_id, event.id, RegistrationCommand())
    registration = mock_uow.registrations.create.call_args.args[0]
    mock_uow.registrations.get_by_event_and_member.return_value = registration

    result = await _register(mock_uow).execute(
        member.auth_user_id, event.id, RegistrationCommand(status=RegistrationStatus.declined)
    )

    assert result.value.id == first.value.id
    assert result.value.total_cost == Decimal("0")
    mock_uow.registrations.update.assert_called_once_with(registration)


@pytest.mark.asyncio
async def test_full_event_still_accepts_registrations(mock_uow, tenant, member):
    event = make_event(tenant, member, max_participants=1)
    mock_uow.events.get_by_id.return_value = event
    mock_uow.registrations.count_by_event_ids.return_value = {event.id: 5}

    result = await _register(mock_uow).execute(member.auth_user_id, event.id, RegistrationCommand())

    assert result.is_ok()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "event_overrides, command, code",
    [
        ({"is_cancelled": True}, RegistrationCommand(), "EVENT_CANCELLED"),
        ({"registration_deadline": NOW - timedelta(minutes=1)}, RegistrationCommand(), "REGISTRATION_CLOSED"),
        ({"allow_guests": False}, RegistrationCommand(guest_count=1), "GUESTS_NOT_ALLOWED"),
        ({}, RegistrationCommand(guest_count=3), "TOO_MANY_GUESTS"),
        ({}, RegistrationCommand(guest_count=1, guest_names=["A", "B"]), "INVALID_GUEST_NAMES"),
        ({"visibility": EventVisibility.board}, RegistrationCommand(), "EVENT_NOT_FOUND"),
    ],
)
async def test_registration_rules(mock_uow, tenant, member, event_overrides, command, code):
    event = make_event(tenant, member, **event_overrides)
    mock_uow.events.get_by_id.return_value = event

    result = await _register(mock_uow).execute(member.auth_user_id, event.id, command)

    assert result.error.code == code
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_event_of_other_club_is_not_found(mock_uow, tenant, member):
    event = make_event(tenant, member, tenant_id=uuid4())
    mock_uow.events.get_by_id.return_value = event

    result = await _register(mock_uow).execute(member.auth_user_id, event.id, RegistrationCommand())

    assert result.error.code == "EVENT_NOT_FOUND"


@pytest.mark.asyncio
async def test_list_events_filters_by_visibility(mock_uow, tenant, member):
    event = make_event(tenant, member)
    mock_uow.events.list_for_tenant.return_value = [event]
    mock_uow.registrations.count_by_event_ids.return_value = {event.id: 4}

    result = await ListEventsUseCase(mock_uow, now=lambda: NOW).execute(member.auth_user_id)

    assert result.is_ok()
    assert result.value.events[0].registration_count == 4
    tenant_id, event_filter = mock_uow.events.list_for_tenant.call_args.args
    assert tenant_id == tenant.id
    assert event_filter.published_only is True
    assert event_filter.start_from == NOW
    assert set(event_filter.visibilities) == {EventVisibility.public, EventVisibility.members}


@pytest.mark.asyncio
async def test_list_events_rejects_unknown_filter(mock_uow):
    result = await ListEventsUseCase(mock_uow).execute("auth", "tomorrow")

    assert result.error.code == "INVALID_FILTER"


@pytest.mark.asyncio
async def test_events_feature_switched_off(mock_uow, tenant, member):
    tenant.features = ["website"]
    mock_uow.events.get_by_id.return_value = make_event(tenant, member)

    listing = await ListEventsUseCase(mock_uow, now=lambda: NOW).execute(member.auth_user_id)
    registration = await _register(mock_uow).execute(
        member.auth_user_id, uuid4(), RegistrationCommand()
    )

    assert listing.error.code == "FEATURE_DISABLED"
    assert registration.error.code == "FEATURE_DISABLED"
    mock_uow.events.list_for_tenant.assert_not_called()
    mock_uow.registrations.create.assert_not_called()
