import pytest
from httpx import AsyncClient

from src.app.use_cases.members.avatar_use_cases import MAX_AVATAR_BYTES
from tests.integration.helpers import invite_and_accept, register_club
from tests.utils.json_compare import exclude_keys


def _by_email(members: list, email: str) -> dict:
    return next(m for m in members if m["email"] == email)


@pytest.mark.asyncio
async def test_list_members_with_roles(client: AsyncClient, auth_provider, test_data):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))
    await invite_and_accept(client, auth_provider, admin, "mitglied@example.com")

    response = await client.get("/api/members", headers=admin)

    assert response.status_code == 200
    members = response.json()["members"]
    assert len(members) == 2
    anna = _by_email(members, "anna@lions-lauf.de")
    assert exclude_keys(anna, {"id", "createdAt"}) == {
        "firstName": "Anna",
        "lastName": "Schmidt",
        "email": "anna@lions-lauf.de",
        "phone": None,
        "avatarUrl": None,
        "isActive": True,
        "status": "active",
        "role": {"type": "ADMIN", "name": "Administrator"},
    }
    assert _by_email(members, "mitglied@example.com")["role"]["name"] == "Mitglied"


@pytest.mark.asyncio
async def test_admin_removes_member(client: AsyncClient, auth_provider, test_data):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))
    await invite_and_accept(client, auth_provider, admin, "mitglied@example.com")
    members = (await client.get("/api/members", headers=admin)).json()["members"]
    target = _by_email(members, "mitglied@example.com")
    auth_user_id = auth_provider.user_by_email("mitglied@example.com").id

    response = await client.delete(f"/api/members/{target['id']}", headers=admin)

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert auth_user_id in auth_provider.deleted
    members = (await client.get("/api/members", headers=admin)).json()["members"]
    assert [m["email"] for m in members] == ["anna@lions-lauf.de"]

    response = await client.delete(f"/api/members/{target['id']}", headers=admin)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_admin_cannot_delete_self(client: AsyncClient, auth_provider, test_data):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))
    me = (await client.get("/api/me", headers=admin)).json()

    response = await client.delete(f"/api/members/{me['id']}", headers=admin)

    assert response.status_code == 400
    assert response.json()["code"] == "CANNOT_DELETE_SELF"


@pytest.mark.asyncio
async def test_plain_member_cannot_delete(client: AsyncClient, auth_provider, test_data):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))
    member = await invite_and_accept(client, auth_provider, admin, "mitglied@example.com")
    admin_id = (await client.get("/api/me", headers=admin)).json()["id"]

    response = await client.delete(f"/api/members/{admin_id}", headers=member)

    assert response.status_code == 403
    assert auth_provider.deleted == []


@pytest.mark.asyncio
async def test_member_of_other_club_cannot_be_deleted(client: AsyncClient, auth_provider, test_data):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))
    _, other_admin = await register_club(
        client, auth_provider, test_data.get_copy("other_club_registration")
    )
    admin_id = (await client.get("/api/me", headers=admin)).json()["id"]

    response = await client.delete(f"/api/members/{admin_id}", headers=other_admin)

    assert response.status_code == 403
    assert response.json()["code"] == "FORBIDDEN_TENANT"


@pytest.mark.asyncio
async def test_profile_update(client: AsyncClient, auth_provider, test_data):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))

    response = await client.get("/api/me", headers=admin)
    assert response.status_code == 200
    profile = response.json()
    assert profile["tenantName"] == "Lions Club Lauf"
    assert profile["locale"] == "de"
    assert profile["emailNotifications"] is True

    response = await client.patch(
        "/api/me",
        json={"firstName": " Anna ", "lastName": "Meier", "phone": "0911 123", "locale": "en"},
        headers=admin,
    )
    assert response.status_code == 200
    assert exclude_keys(response.json()["member"], {"id"}) == {
        "firstName": "Anna",
        "lastName": "Meier",
        "phone": "0911 123",
        "locale": "en",
        "emailNotifications": True,
    }

    response = await client.patch("/api/me", json={"firstName": "", "lastName": "X"}, headers=admin)
    assert response.status_code == 400
    assert response.json()["code"] == "NAME_REQUIRED"


@pytest.mark.asyncio
async def test_avatar_upload_replaces_previous(
    client: AsyncClient, auth_provider, avatar_storage, test_data
):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))

    response = await client.post(
        "/api/me/avatar",
        files={"file": ("portrait.png", b"\x89PNG first", "image/png")},
        headers=admin,
    )
    assert response.status_code == 200
    first_url = response.json()["avatarUrl"]
    assert first_url.startswith(avatar_storage.PREFIX)
    assert first_url.endswith(".png")

    response = await client.post(
        "/api/me/avatar",
        files={"file": ("portrait.jpg", b"\xff\xd8 second", "image/jpeg")},
        headers=admin,
    )
    second_url = response.json()["avatarUrl"]
    assert list(avatar_storage.objects.values()) == [b"\xff\xd8 second"]
    assert (await client.get("/api/me", headers=admin)).json()["avatarUrl"] == second_url

    response = await client.delete("/api/me/avatar", headers=admin)
    assert response.status_code == 200
    assert avatar_storage.objects == {}

    response = await client.delete("/api/me/avatar", headers=admin)
    assert response.status_code == 400
    assert response.json()["code"] == "NO_AVATAR"


@pytest.mark.asyncio
async def test_avatar_rejects_non_images(client: AsyncClient, auth_provider, test_data):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))

    response = await client.post(
        "/api/me/avatar",
        files={"file": ("notes.txt", b"hello", "text/plain")},
        headers=admin,
    )

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_FILE_TYPE"


@pytest.mark.asyncio
async def test_avatar_over_size_limit_is_rejected(
    client: AsyncClient, auth_provider, avatar_storage, test_data
):
    _, admin = await register_club(client, auth_provider, test_data.get_copy("club_registration"))

    response = await client.post(
        "/api/me/avatar",
        files={"file": ("huge.png", b"\x00" * (MAX_AVATAR_BYTES + 1024), "image/png")},
        headers=admin,
    )

    assert response.status_code == 400
    assert response.json()["code"] == "FILE_TOO_LARGE"
    assert avatar_storage.objects == {}
