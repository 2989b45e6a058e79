from datetime import timedelta

import pytest

from src.app.repositories.errors import DuplicateEntryError
from src.app.use_cases.invitations import AcceptInvitationUseCase
from src.domain.entities import InvitationStatus, MemberStatus, RoleType
from tests.unit.factories import NOW, make_invitation, make_member, make_role


@pytest.fixture
def invitation(mock_uow, tenant):
    inviter = make_member(tenant, email="admin@example.com")
    invitation = make_invitation(tenant, inviter, role_type=RoleType.board)
    mock_uow.invitations.get_by_token.return_value = invitation
    mock_uow.invitations.mark_accepted.return_value = True
    mock_uow.roles.get_by_tenant_and_type.return_value = make_role(tenant, RoleType.board)
    return invitation


def _use_case(mock_uow, now=NOW):
    return AcceptInvitationUseCase(mock_uow, now=lambda: now)


@pytest.mark.asyncio
async def test_successful_acceptance(mock_uow, invitation, tenant):
    result = await _use_case(mock_uow).execute(invitation.token, "auth-1", " Max ", "Muster")

    assert result.is_ok()
    assert result.value.success is True

    member = mock_uow.members.create.call_args.args[0]
    assert member.tenant_id == tenant.id
    assert member.auth_user_id == "auth-1"
    assert member.email == invitation.email
    assert member.first_name == "Max"
    assert member.status == MemberStatus.active
    assert member.role_id == mock_uow.roles.get_by_tenant_and_type.return_value.id

    mock_uow.roles.get_by_tenant_and_type.assert_called_once_with(tenant.id, RoleType.board)
    mock_uow.invitations.mark_accepted.assert_called_once_with(invitation.id, NOW)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_invitation_expiring_now_is_still_valid(mock_uow, invitation):
    result = await _use_case(mock_uow, now=invitation.expires_at).execute(
        invitation.token, "auth-1", "Max", "Muster"
    )

    assert result.is_ok()


@pytest.mark.asyncio
async def test_expired_invitation_creates_no_member(mock_uow, invitation):
    later = invitation.expires_at + timedelta(seconds=1)

    result = await _use_case(mock_uow, now=later).execute(
        invitation.token, "auth-1", "Max", "Muster"
    )

    assert result.error.code == "INVITATION_EXPIRED"
    assert invitation.status == InvitationStatus.expired
    mock_uow.invitations.update.assert_called_once_with(invitation)
    mock_uow.members.create.assert_not_called()
    mock_uow.invitations.mark_accepted.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status", [InvitationStatus.accepted, InvitationStatus.revoked]
)
async def test_non_pending_invitation_is_rejected(mock_uow, invitation, status):
    invitation.status = status

    result = await _use_case(mock_uow).execute(invitation.token, "auth-1", "Max", "Muster")

    assert result.error.code == "INVITATION_INVALID"
    mock_uow.members.create.assert_not_called()


@pytest.mark.asyncio
async def test_invitation_already_marked_expired_reports_expiry(mock_uow, invitation):
    invitation.status = InvitationStatus.expired

    result = await _use_case(mock_uow).execute(invitation.token, "auth-1", "Max", "Muster")

    assert result.error.code == "INVITATION_EXPIRED"
    mock_uow.invitations.update.assert_not_called()
    mock_uow.members.create.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_token(mock_uow):
    mock_uow.invitations.get_by_token.return_value = None

    result = await _use_case(mock_uow).execute("nope", "auth-1", "Max", "Muster")

    assert result.error.code == "INVITATION_NOT_FOUND"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "auth_user_id, first_name, last_name",
    [(None, "Max", "Muster"), ("auth-1", "", "Muster"), ("auth-1", "Max", None)],
)
async def test_missing_data(mock_uow, auth_user_id, first_name, last_name):
    result = await _use_case(mock_uow).execute("tok", auth_user_id, first_name, last_name)

    assert result.error.code == "MISSING_DATA"
    mock_uow.invitations.get_by_token.assert_not_called()


@pytest.mark.asyncio
async def test_lost_race_rolls_back(mock_uow, invitation):
    mock_uow.invitations.mark_accepted.return_value = False

    result = await _use_case(mock_uow).execute(invitation.token, "auth-1", "Max", "Muster")

    assert result.error.code == "INVITATION_INVALID"
    mock_uow.rollback.assert_called_once()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_duplicate_member_maps_to_member_exists(mock_uow, invitation):
    mock_uow.members.create.side_effect = DuplicateEntryError("uq_member_tenant_email")

    result = await _use_case(mock_uow).execute(invitation.token, "auth-1", "Max", "Muster")

    assert result.error.code == "MEMBER_ALREADY_EXISTS"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_missing_role_is_a_provisioning_error(mock_uow, invitation):
    mock_uow.roles.get_by_tenant_and_type.return_value = None

    result = await _use_case(mock_uow).execute(invitation.token, "auth-1", "Max", "Muster")

    assert result.error.code == "ROLE_NOT_FOUND"
