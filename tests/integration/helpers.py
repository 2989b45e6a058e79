from httpx import AsyncClient

from tests.fixtures.fakes import FakeAuthProvider


def session_cookie(token: str) -> dict:
    return {"Cookie": f"sb-access-token={token}"}


async def register_club(client: AsyncClient, auth_provider: FakeAuthProvider, payload: dict):
    """Register a club and return (response body, admin request headers)"""
    response = await client.post("/api/register", json=payload)
    assert response.status_code == 200, response.text
    admin = auth_provider.user_by_email(payload["email"].lower())
    return response.json(), session_cookie(auth_provider.issue(admin))


async def invite_and_accept(
    client: AsyncClient,
    auth_provider: FakeAuthProvider,
    admin_headers: dict,
    email: str,
    role_type: str = "MEMBER",
):
    """Invite email, sign the invitee up and accept; returns their request headers"""
    response = await client.post(
        "/api/invitations",
        json={"email": email, "roleType": role_type},
        headers=admin_headers,
    )
    assert response.status_code == 200, response.text
    token = response.json()["invitation"]["inviteUrl"].rsplit("/", 1)[1]

    user = await auth_provider.sign_up(email, "geheim123", {}, "http://test/auth/callback")
    response = await client.post(
        f"/api/invitations/{token}/accept",
        json={"authUserId": user.id, "firstName": "Neu", "lastName": "Mitglied"},
    )
    assert response.status_code == 200, response.text
    return session_cookie(auth_provider.issue(user))
