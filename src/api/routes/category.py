from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.auth_provider import AuthUser
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.planning import (
    CategoryCommand,
    CategoryInfo,
    CategoryListResponse,
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    DeleteResponse,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from src.depends import get_current_auth_user, get_unit_of_work

router = APIRouter(prefix="/api/event-categories", tags=["Event Categories"])

CATEGORY_ERROR_STATUS = {
    "NAME_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "INVALID_COLOR": status.HTTP_400_BAD_REQUEST,
    "CATEGORY_EXISTS": status.HTTP_400_BAD_REQUEST,
    "CATEGORY_IN_USE": status.HTTP_400_BAD_REQUEST,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "MEMBER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CATEGORY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "FEATURE_DISABLED": status.HTTP_404_NOT_FOUND,
}


@router.get("", response_model=CategoryListResponse)
async def list_categories(
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListCategoriesUseCase(uow).execute(auth_user.id)
    if result.is_err():
        raise_for_error(result.error, CATEGORY_ERROR_STATUS)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CategoryInfo)
async def create_category(
    command: CategoryCommand,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateCategoryUseCase(uow).execute(auth_user.id, command)
    if result.is_err():
        raise_for_error(result.error, CATEGORY_ERROR_STATUS)
    return result.value


@router.patch("/{category_id}", response_model=CategoryInfo)
async def update_category(
    category_id: UUID,
    command: CategoryCommand,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateCategoryUseCase(uow).execute(auth_user.id, category_id, command)
    if result.is_err():
        raise_for_error(result.error, CATEGORY_ERROR_STATUS)
    return result.value


@router.delete("/{category_id}", response_model=DeleteResponse)
async def delete_category(
    category_id: UUID,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Event Category

    Raises:
        - 400 Bad Request: CATEGORY_IN_USE while planned events or events use it
        - 404 Not Found: CATEGORY_NOT_FOUND, also for other clubs' categories
    """
    result = await DeleteCategoryUseCase(uow).execute(auth_user.id, category_id)
    if result.is_err():
        raise_for_error(result.error, CATEGORY_ERROR_STATUS)
    return result.value
