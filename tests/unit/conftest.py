from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.domain.entities import Tenant


def _repository(*methods):
    repo = MagicMock()
    for name in methods:
        setattr(repo, name, AsyncMock())
    return repo


@pytest.fixture
def mock_uow(tenant):
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.tenants = _repository("get_by_id", "get_by_slug", "get_by_club_number", "create", "update")
    uow.tenants.get_by_id.return_value = tenant
    uow.permissions = _repository("get_all", "create")
    uow.roles = _repository(
        "get_by_id",
        "get_by_tenant_and_type",
        "get_by_tenant_id",
        "create",
        "add_permissions",
        "get_permission_codes",
    )
    uow.members = _repository(
        "get_by_id",
        "get_by_auth_user_id",
        "get_by_tenant_and_email",
        "get_by_email",
        "get_by_tenant_id",
        "count_active_by_role_type",
        "create",
        "update",
        "delete",
    )
    uow.invitations = _repository(
        "get_by_id",
        "get_by_token",
        "get_by_token_or_id",
        "get_pending_by_tenant_and_email",
        "get_pending_by_tenant_id",
        "create",
        "update",
        "delete",
        "delete_stale",
        "delete_by_inviter",
        "mark_accepted",
    )
    uow.events = _repository(
        "get_by_id", "list_for_tenant", "create", "update", "reassign_creator"
    )
    uow.registrations = _repository(
        "get_by_event_and_member",
        "get_by_event_id",
        "count_by_event_ids",
        "create",
        "update",
        "delete_by_member",
    )
    uow.categories = _repository(
        "get_by_id",
        "get_by_tenant_and_name",
        "list_for_tenant",
        "max_sort_order",
        "count_events",
        "create",
        "update",
        "delete",
    )
    uow.lions_years = _repository(
        "get_by_id", "list_for_tenant", "archive_active", "create", "update", "delete"
    )
    uow.planned_events = _repository(
        "get_by_id",
        "get_by_year_id",
        "list_upcoming",
        "count_by_year_ids",
        "count_by_category",
        "create",
        "update",
        "delete",
        "delete_by_year",
    )
    return uow


@pytest.fixture
def tenant():
    return Tenant(
        id=uuid4(),
        name="Lions Club Lauf",
        slug="lauf",
        club_number="123456",
        features=["events", "planning", "website"],
    )
