from decimal import Decimal

import pytest
from httpx import AsyncClient

from tests.integration.helpers import invite_and_accept, register_club


async def _create_event(client, headers, payload):
    response = await client.post("/api/events", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def event_payload(test_data):
    return test_data.get_copy("public_event")


@pytest.mark.asyncio
async def test_member_registers_with_guests(
    client: AsyncClient, auth_provider, test_data, event_payload
):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))
    member = await invite_and_accept(client, auth_provider, admin, "mitglied@example.com")
    event = await _create_event(client, admin, event_payload)

    response = await client.put(
        f"/api/events/{event['id']}/registration",
        json={"status": "registered", "guestCount": 2, "guestNames": [" Eva ", "Paul"]},
        headers=member,
    )

    assert response.status_code == 200
    registration = response.json()
    assert registration["memberName"] == "Neu Mitglied"
    assert registration["guestNames"] == ["Eva", "Paul"]
    assert Decimal(registration["totalCost"]) == Decimal("70.00")

    # Switching to maybe keeps the row and zeroes the cost
    response = await client.put(
        f"/api/events/{event['id']}/registration",
        json={"status": "maybe"},
        headers=member,
    )
    assert response.json()["id"] == registration["id"]
    assert Decimal(response.json()["totalCost"]) == Decimal("0")

    detail = (await client.get(f"/api/events/{event['id']}", headers=admin)).json()
    assert [r["status"] for r in detail["registrations"]] == ["maybe"]


@pytest.mark.asyncio
async def test_guest_limits(client: AsyncClient, auth_provider, test_data, event_payload):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))
    member = await invite_and_accept(client, auth_provider, admin, "mitglied@example.com")
    event = await _create_event(client, admin, event_payload)
    url = f"/api/events/{event['id']}/registration"

    response = await client.put(url, json={"guestCount": 3}, headers=member)
    assert response.status_code == 400
    assert response.json()["code"] == "TOO_MANY_GUESTS"

    response = await client.put(
        url, json={"guestCount": 1, "guestNames": ["A", "B"]}, headers=member
    )
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_GUEST_NAMES"

    await client.patch(f"/api/events/{event['id']}", json={"allowGuests": False}, headers=admin)
    response = await client.put(url, json={"guestCount": 1}, headers=member)
    assert response.status_code == 400
    assert response.json()["code"] == "GUESTS_NOT_ALLOWED"


@pytest.mark.asyncio
async def test_cancelled_and_closed_events_reject_registration(
    client: AsyncClient, auth_provider, test_data, event_payload
):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))
    member = await invite_and_accept(client, auth_provider, admin, "mitglied@example.com")
    event = await _create_event(client, admin, event_payload)
    url = f"/api/events/{event['id']}/registration"

    await client.patch(
        f"/api/events/{event['id']}",
        json={"registrationDeadline": "2020-01-01T00:00:00Z"},
        headers=admin,
    )
    response = await client.put(url, json={}, headers=member)
    assert response.json()["code"] == "REGISTRATION_CLOSED"

    await client.patch(f"/api/events/{event['id']}", json={"isCancelled": True}, headers=admin)
    response = await client.put(url, json={}, headers=member)
    assert response.status_code == 400
    assert response.json()["code"] == "EVENT_CANCELLED"


@pytest.mark.asyncio
async def test_board_events_are_hidden_from_members(
    client: AsyncClient, auth_provider, test_data, event_payload
):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))
    member = await invite_and_accept(client, auth_provider, admin, "mitglied@example.com")
    board = await invite_and_accept(client, auth_provider, admin, "vorstand@example.com", "BOARD")

    event_payload["visibility"] = "board"
    event_payload["title"] = "Vorstandssitzung"
    board_event = await _create_event(client, admin, event_payload)

    response = await client.get(f"/api/events/{board_event['id']}", headers=member)
    assert response.status_code == 404

    titles = [e["title"] for e in (await client.get("/api/events", headers=member)).json()["events"]]
    assert "Vorstandssitzung" not in titles

    titles = [e["title"] for e in (await client.get("/api/events", headers=board)).json()["events"]]
    assert titles == ["Vorstandssitzung"]


@pytest.mark.asyncio
async def test_event_filters(client: AsyncClient, auth_provider, test_data, event_payload):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))
    await _create_event(client, admin, event_payload)
    past = dict(
        event_payload,
        title="Jahreshauptversammlung",
        startDate="2020-03-01T19:00:00Z",
        endDate="2020-03-01T22:00:00Z",
    )
    await _create_event(client, admin, past)

    async def titles(filter):
        response = await client.get("/api/events", params={"filter": filter}, headers=admin)
        return [e["title"] for e in response.json()["events"]]

    assert await titles("upcoming") == ["Benefizkonzert"]
    assert await titles("past") == ["Jahreshauptversammlung"]
    assert await titles("all") == ["Jahreshauptversammlung", "Benefizkonzert"]

    response = await client.get("/api/events", params={"filter": "soon"}, headers=admin)
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_FILTER"


@pytest.mark.asyncio
async def test_event_validation_and_permissions(
    client: AsyncClient, auth_provider, test_data, event_payload
):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))
    member = await invite_and_accept(client, auth_provider, admin, "mitglied@example.com")

    response = await client.post("/api/events", json=event_payload, headers=member)
    assert response.status_code == 403

    event_payload["endDate"] = "2099-04-30T18:00:00Z"
    response = await client.post("/api/events", json=event_payload, headers=admin)
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_DATES"

    event_payload.pop("title")
    response = await client.post("/api/events", json=event_payload, headers=admin)
    assert response.json()["code"] == "TITLE_REQUIRED"

    response = await client.post(
        "/api/events", json={"title": "X", "startDate": "kein Datum"}, headers=admin
    )
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"
