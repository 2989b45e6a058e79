from datetime import datetime, timedelta
from uuid import uuid4

from src.domain.entities import (
    EventCategory,
    Invitation,
    LionsYear,
    LionsYearStatus,
    Member,
    MemberStatus,
    PlannedEvent,
    Role,
    RoleType,
)
from src.domain.permissions import ROLE_GRANTS, expand_grants

NOW = datetime(2026, 3, 1, 12, 0, 0)


def make_role(tenant, role_type: RoleType) -> Role:
    return Role(id=uuid4(), tenant_id=tenant.id, name=role_type.value.title(), type=role_type)


def make_member(tenant, role=None, email="anna@example.com", **overrides) -> Member:
    values = dict(
        id=uuid4(),
        tenant_id=tenant.id,
        auth_user_id=str(uuid4()),
        email=email,
        first_name="Anna",
        last_name="Schmidt",
        status=MemberStatus.active,
        is_active=True,
        role_id=role.id if role else None,
    )
    values.update(overrides)
    return Member(**values)


def make_invitation(tenant, inviter, **overrides) -> Invitation:
    values = dict(
        id=uuid4(),
        tenant_id=tenant.id,
        email="neu@example.com",
        role_type=RoleType.member,
        token="tok-" + uuid4().hex,
        invited_by_id=inviter.id,
        expires_at=NOW + timedelta(days=7),
        created_at=NOW,
    )
    values.update(overrides)
    return Invitation(**values)


def make_category(tenant, name="Clubabend", **overrides) -> EventCategory:
    values = dict(id=uuid4(), tenant_id=tenant.id, name=name)
    values.update(overrides)
    return EventCategory(**values)


def make_year(tenant, status=LionsYearStatus.planning, **overrides) -> LionsYear:
    values = dict(
        id=uuid4(),
        tenant_id=tenant.id,
        name="Lionsjahr 2026/2027",
        start_date=datetime(2026, 7, 1),
        end_date=datetime(2027, 6, 30),
        status=status,
        created_at=NOW,
        updated_at=NOW,
    )
    values.update(overrides)
    return LionsYear(**values)


def make_planned_event(year, category, **overrides) -> PlannedEvent:
    values = dict(
        id=uuid4(),
        lions_year_id=year.id,
        title="Benefizkonzert",
        date=datetime(2026, 9, 12, 18, 0),
        category_id=category.id,
    )
    values.update(overrides)
    return PlannedEvent(**values)

def grant_role(uow, *members_and_roles):
    """Wire roles.get_by_id / get_permission_codes for the given (member, role) pairs"""
    roles = {role.id: role for _, role in members_and_roles}

    async def get_by_id(role_id):
        return roles.get(role_id)

    async def get_permission_codes(role_id):
        role = roles.get(role_id)
        if role is None:
            return []
        return [code.value for code in expand_grants(ROLE_GRANTS[role.type])]

    uow.roles.get_by_id.side_effect = get_by_id
    uow.roles.get_permission_codes.side_effect = get_permission_codes
