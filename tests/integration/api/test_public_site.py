import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import Tenant
from tests.integration.helpers import register_club

CLUB_HOST = "http://lions-club-lauf-123456.lions-hub.de"


async def _enable_website(client, admin, test_data):
    response = await client.put(
        "/api/website", json=test_data.get_copy("website_settings"), headers=admin
    )
    assert response.status_code == 200, response.text


@pytest.mark.asyncio
async def test_site_is_hidden_until_enabled(client: AsyncClient, auth_provider, test_data):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))

    response = await client.get(f"{CLUB_HOST}/")
    assert response.status_code == 404
    assert response.json()["code"] == "SITE_NOT_FOUND"

    # Saving the settings drops the cached tenant, the site shows up at once
    await _enable_website(client, admin, test_data)

    response = await client.get(f"{CLUB_HOST}/")
    assert response.status_code == 200
    assert response.headers["x-is-public-site"] == "true"
    assert response.headers["x-tenant-slug"] == "lions-club-lauf"
    assert response.headers["x-club-number"] == "123456"
    site = response.json()["site"]
    assert site["websiteTitle"] == "Lions Club Lauf an der Pegnitz"
    assert site["socialFacebook"] == "https://facebook.com/lionslauf"
    assert "socialInstagram" not in site


@pytest.mark.asyncio
async def test_public_events_page(client: AsyncClient, auth_provider, test_data):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))
    await _enable_website(client, admin, test_data)
    public_event = test_data.get_copy("public_event")
    await client.post("/api/events", json=public_event, headers=admin)
    await client.post(
        "/api/events",
        json=dict(public_event, title="Clubabend", visibility="members"),
        headers=admin,
    )

    response = await client.get(f"{CLUB_HOST}/events")

    assert response.status_code == 200
    body = response.json()
    assert [e["title"] for e in body["upcomingEvents"]] == ["Benefizkonzert"]
    assert body["pastEvents"] == []

    response = await client.get(f"{CLUB_HOST}/about")
    assert response.json()["site"]["aboutText"] == "Seit 1972 in Lauf."
    assert "upcomingEvents" not in response.json()


@pytest.mark.asyncio
async def test_club_number_must_match(client: AsyncClient, auth_provider, test_data):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))
    await _enable_website(client, admin, test_data)

    response = await client.get("http://lions-club-lauf-999999.lions-hub.de/")
    assert response.status_code == 404

    response = await client.get("/public/lions-club-lauf/123456/contact")
    assert response.status_code == 200
    assert response.json()["site"]["contactEmail"] == "info@lions-lauf.de"


@pytest.mark.asyncio
async def test_website_settings_validation(client: AsyncClient, auth_provider, test_data):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))
    settings = test_data.get_copy("website_settings")

    response = await client.put(
        "/api/website", json=dict(settings, heroImage="kein-link"), headers=admin
    )
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_URL"

    response = await client.put(
        "/api/website", json=dict(settings, websiteTitle=" "), headers=admin
    )
    assert response.json()["code"] == "TITLE_REQUIRED"


@pytest.mark.asyncio
async def test_app_hosts_are_not_rewritten(client: AsyncClient):
    response = await client.get("http://app.lions-hub.de/health", params={"tenant": "lauf"})

    assert response.status_code == 200
    assert response.headers["x-is-public-site"] == "false"
    assert response.headers["x-tenant-slug"] == "lauf"


@pytest.mark.asyncio
async def test_site_needs_website_feature(
    client: AsyncClient, db_session, auth_provider, test_data
):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))
    await _enable_website(client, admin, test_data)
    tenant = (await db_session.exec(select(Tenant).where(Tenant.club_number == "123456"))).one()
    tenant.features = ["events", "planning"]
    db_session.add(tenant)
    await db_session.commit()

    response = await client.get(f"{CLUB_HOST}/")

    assert response.status_code == 404
    assert response.json()["code"] == "SITE_NOT_FOUND"
