from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.services.auth_provider import AuthProviderError
from src.app.use_cases.members import RemoveMemberUseCase
from src.domain.entities import RoleType
from tests.unit.factories import grant_role, make_member, make_role


@pytest.fixture
def auth_provider():
    provider = MagicMock()
    provider.delete_user = AsyncMock()
    return provider


@pytest.fixture
def roles(tenant):
    return {role_type: make_role(tenant, role_type) for role_type in RoleType}


def _arrange(mock_uow, actor, target, roles):
    grant_role(mock_uow, *[(None, role) for role in roles.values()])
    mock_uow.members.get_by_auth_user_id.return_value = actor
    mock_uow.members.get_by_id.return_value = target


@pytest.mark.asyncio
async def test_successful_member_removal_by_admin(mock_uow, auth_provider, tenant, roles):
    actor = make_member(tenant, roles[RoleType.admin], email="admin@example.com")
    target = make_member(tenant, roles[RoleType.member], email="member@example.com")
    _arrange(mock_uow, actor, target, roles)

    result = await RemoveMemberUseCase(mock_uow, auth_provider).execute(
        actor.auth_user_id, target.id
    )

    assert result.is_ok()
    assert result.value.success is True
    auth_provider.delete_user.assert_called_once_with(target.auth_user_id)
    mock_uow.invitations.delete_by_inviter.assert_called_once_with(target.id)
    mock_uow.events.reassign_creator.assert_called_once_with(target.id, actor.id)
    mock_uow.registrations.delete_by_member.assert_called_once_with(target.id)
    mock_uow.members.delete.assert_called_once_with(target)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_auth_failure_does_not_block_deletion(mock_uow, auth_provider, tenant, roles):
    actor = make_member(tenant, roles[RoleType.admin], email="admin@example.com")
    target = make_member(tenant, roles[RoleType.member], email="member@example.com")
    _arrange(mock_uow, actor, target, roles)
    auth_provider.delete_user.side_effect = AuthProviderError("503")

    result = await RemoveMemberUseCase(mock_uow, auth_provider).execute(
        actor.auth_user_id, target.id
    )

    assert result.is_ok()
    mock_uow.members.delete.assert_called_once_with(target)


@pytest.mark.asyncio
async def test_board_member_cannot_delete(mock_uow, auth_provider, tenant, roles):
    actor = make_member(tenant, roles[RoleType.board], email="board@example.com")
    target = make_member(tenant, roles[RoleType.member], email="member@example.com")
    _arrange(mock_uow, actor, target, roles)

    result = await RemoveMemberUseCase(mock_uow, auth_provider).execute(
        actor.auth_user_id, target.id
    )

    assert result.error.code == "FORBIDDEN"
    mock_uow.members.delete.assert_not_called()


@pytest.mark.asyncio
async def test_last_admin_is_protected(mock_uow, auth_provider, tenant, roles):
    actor = make_member(tenant, roles[RoleType.president], email="praesident@example.com")
    target = make_member(tenant, roles[RoleType.admin], email="admin@example.com")
    _arrange(mock_uow, actor, target, roles)
    mock_uow.members.count_active_by_role_type.return_value = 1

    result = await RemoveMemberUseCase(mock_uow, auth_provider).execute(
        actor.auth_user_id, target.id
    )

    assert result.error.code == "CANNOT_DELETE_LAST_ADMIN"
    auth_provider.delete_user.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_self_deletion_is_rejected(mock_uow, auth_provider, tenant, roles):
    actor = make_member(tenant, roles[RoleType.admin])
    _arrange(mock_uow, actor, actor, roles)

    result = await RemoveMemberUseCase(mock_uow, auth_provider).execute(
        actor.auth_user_id, actor.id
    )

    assert result.error.code == "CANNOT_DELETE_SELF"


@pytest.mark.asyncio
async def test_unknown_target(mock_uow, auth_provider, tenant, roles):
    actor = make_member(tenant, roles[RoleType.admin])
    _arrange(mock_uow, actor, None, roles)

    result = await RemoveMemberUseCase(mock_uow, auth_provider).execute(
        actor.auth_user_id, uuid4()
    )

    assert result.error.code == "MEMBER_NOT_FOUND"
