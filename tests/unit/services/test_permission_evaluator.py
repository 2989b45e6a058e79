from uuid import uuid4

import pytest

from src.app.services.permission_evaluator import PermissionEvaluator
from src.domain.entities import RoleType
from src.domain.permissions import PermissionCode
from tests.unit.factories import grant_role, make_member, make_role


@pytest.mark.asyncio
async def test_permissions_follow_role_grants(mock_uow, tenant):
    role = make_role(tenant, RoleType.member)
    member = make_member(tenant, role)
    grant_role(mock_uow, (member, role))

    permissions = await PermissionEvaluator(mock_uow).permissions_for(member)

    assert permissions.has(PermissionCode.events_register)
    assert not permissions.has(PermissionCode.members_invite)


@pytest.mark.asyncio
async def test_member_without_role_has_no_permissions(mock_uow, tenant):
    member = make_member(tenant, role=None)

    permissions = await PermissionEvaluator(mock_uow).permissions_for(member)

    assert not permissions.codes
    mock_uow.roles.get_permission_codes.assert_not_called()


@pytest.mark.asyncio
async def test_cannot_delete_member_of_other_tenant(mock_uow, tenant):
    actor = make_member(tenant)
    other = make_member(tenant, tenant_id=uuid4(), email="x@example.com")

    result = await PermissionEvaluator(mock_uow).check_member_deletion(actor, other)

    assert result.is_err()
    assert result.error.code == "FORBIDDEN_TENANT"


@pytest.mark.asyncio
async def test_cannot_delete_self(mock_uow, tenant):
    actor = make_member(tenant)

    result = await PermissionEvaluator(mock_uow).check_member_deletion(actor, actor)

    assert result.error.code == "CANNOT_DELETE_SELF"


@pytest.mark.asyncio
async def test_cannot_delete_last_admin(mock_uow, tenant):
    admin_role = make_role(tenant, RoleType.admin)
    president_role = make_role(tenant, RoleType.president)
    actor = make_member(tenant, president_role)
    target = make_member(tenant, admin_role, email="admin@example.com")
    grant_role(mock_uow, (actor, president_role), (target, admin_role))
    mock_uow.members.count_active_by_role_type.return_value = 1

    result = await PermissionEvaluator(mock_uow).check_member_deletion(actor, target)

    assert result.error.code == "CANNOT_DELETE_LAST_ADMIN"
    mock_uow.members.count_active_by_role_type.assert_called_once_with(
        tenant.id, RoleType.admin
    )


@pytest.mark.asyncio
async def test_admin_can_be_deleted_when_another_remains(mock_uow, tenant):
    admin_role = make_role(tenant, RoleType.admin)
    actor = make_member(tenant, admin_role)
    target = make_member(tenant, admin_role, email="admin2@example.com")
    grant_role(mock_uow, (actor, admin_role))
    mock_uow.members.count_active_by_role_type.return_value = 2

    result = await PermissionEvaluator(mock_uow).check_member_deletion(actor, target)

    assert result.is_ok()
