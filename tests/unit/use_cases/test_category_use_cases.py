from uuid import uuid4

import pytest

from src.app.repositories.errors import DuplicateEntryError
from src.app.use_cases.planning import (
    CategoryCommand,
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from src.domain.entities import RoleType
from tests.unit.factories import grant_role, make_category, make_member, make_role


def _sign_in(mock_uow, tenant, role_type):
    role = make_role(tenant, role_type)
    member = make_member(tenant, role)
    grant_role(mock_uow, (member, role))
    mock_uow.members.get_by_auth_user_id.return_value = member
    return member


@pytest.fixture
def board(mock_uow, tenant):
    mock_uow.categories.get_by_tenant_and_name.return_value = None
    mock_uow.categories.max_sort_order.return_value = 4
    mock_uow.planned_events.count_by_category.return_value = 0
    mock_uow.categories.count_events.return_value = 0
    return _sign_in(mock_uow, tenant, RoleType.board)


@pytest.mark.asyncio
async def test_create_category_appends_to_sort_order(mock_uow, board, tenant):
    result = await CreateCategoryUseCase(mock_uow).execute(
        board.auth_user_id, CategoryCommand(name=" Activity ", icon="heart")
    )

    assert result.is_ok()
    category = mock_uow.categories.create.call_args.args[0]
    assert category.tenant_id == tenant.id
    assert category.name == "Activity"
    assert category.color == "#00338D"
    assert category.sort_order == 5
    assert result.value.model_dump(by_alias=True)["sortOrder"] == 5
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_category_with_taken_name(mock_uow, board, tenant):
    mock_uow.categories.get_by_tenant_and_name.return_value = make_category(tenant, "Activity")

    result = await CreateCategoryUseCase(mock_uow).execute(
        board.auth_user_id, CategoryCommand(name="Activity")
    )

    assert result.error.code == "CATEGORY_EXISTS"
    mock_uow.categories.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_category_race_on_unique_name(mock_uow, board):
    mock_uow.commit.side_effect = DuplicateEntryError("uq_event_category_tenant_name")

    result = await CreateCategoryUseCase(mock_uow).execute(
        board.auth_user_id, CategoryCommand(name="Activity")
    )

    assert result.error.code == "CATEGORY_EXISTS"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "command, code",
    [
        (CategoryCommand(name="  "), "NAME_REQUIRED"),
        (CategoryCommand(name="Activity", color="blue"), "INVALID_COLOR"),
    ],
)
async def test_create_category_validation(mock_uow, board, command, code):
    result = await CreateCategoryUseCase(mock_uow).execute(board.auth_user_id, command)

    assert result.error.code == code
    mock_uow.members.get_by_auth_user_id.assert_not_called()


@pytest.mark.asyncio
async def test_plain_member_may_list_but_not_create(mock_uow, tenant):
    member = _sign_in(mock_uow, tenant, RoleType.member)
    mock_uow.categories.list_for_tenant.return_value = [make_category(tenant, sort_order=1)]

    listing = await ListCategoriesUseCase(mock_uow).execute(member.auth_user_id)
    created = await CreateCategoryUseCase(mock_uow).execute(
        member.auth_user_id, CategoryCommand(name="Activity")
    )

    assert [c.name for c in listing.value.categories] == ["Clubabend"]
    assert created.error.code == "FORBIDDEN"


@pytest.mark.asyncio
async def test_planning_feature_switched_off(mock_uow, board, tenant):
    tenant.features = ["events", "website"]

    result = await ListCategoriesUseCase(mock_uow).execute(board.auth_user_id)

    assert result.error.code == "FEATURE_DISABLED"
    mock_uow.categories.list_for_tenant.assert_not_called()


@pytest.mark.asyncio
async def test_rename_to_another_categorys_name(mock_uow, board, tenant):
    category = make_category(tenant, "Clubabend")
    mock_uow.categories.get_by_id.return_value = category
    mock_uow.categories.get_by_tenant_and_name.return_value = make_category(tenant, "Activity")

    result = await UpdateCategoryUseCase(mock_uow).execute(
        board.auth_user_id, category.id, CategoryCommand(name="Activity")
    )

    assert result.error.code == "CATEGORY_EXISTS"
    mock_uow.categories.update.assert_not_called()


@pytest.mark.asyncio
async def test_update_category_only_changes_given_fields(mock_uow, board, tenant):
    category = make_category(tenant, "Clubabend", color="#FFB81C", sort_order=2)
    mock_uow.categories.get_by_id.return_value = category

    result = await UpdateCategoryUseCase(mock_uow).execute(
        board.auth_user_id, category.id, CategoryCommand(icon="star")
    )

    assert result.is_ok()
    assert category.name == "Clubabend"
    assert category.color == "#FFB81C"
    assert category.sort_order == 2
    assert category.icon == "star"


@pytest.mark.asyncio
async def test_update_category_of_other_club(mock_uow, board, tenant):
    other = make_category(tenant, tenant_id=uuid4())
    mock_uow.categories.get_by_id.return_value = other

    result = await UpdateCategoryUseCase(mock_uow).execute(
        board.auth_user_id, other.id, CategoryCommand(name="Neu")
    )

    assert result.error.code == "CATEGORY_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_category_in_use_by_planned_events(mock_uow, board, tenant):
    category = make_category(tenant)
    mock_uow.categories.get_by_id.return_value = category
    mock_uow.planned_events.count_by_category.return_value = 3

    result = await DeleteCategoryUseCase(mock_uow).execute(board.auth_user_id, category.id)

    assert result.error.code == "CATEGORY_IN_USE"
    assert "3 geplante(r) Termin(e)" in result.error.message
    mock_uow.categories.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete_category_in_use_by_events(mock_uow, board, tenant):
    category = make_category(tenant)
    mock_uow.categories.get_by_id.return_value = category
    mock_uow.categories.count_events.return_value = 1

    result = await DeleteCategoryUseCase(mock_uow).execute(board.auth_user_id, category.id)

    assert result.error.code == "CATEGORY_IN_USE"
    assert result.error.details == {"plannedEvents": 0, "events": 1}


@pytest.mark.asyncio
async def test_delete_unused_category(mock_uow, board, tenant):
    category = make_category(tenant)
    mock_uow.categories.get_by_id.return_value = category

    result = await DeleteCategoryUseCase(mock_uow).execute(board.auth_user_id, category.id)

    assert result.is_ok()
    mock_uow.categories.delete.assert_called_once_with(category)
    mock_uow.commit.assert_called_once()
