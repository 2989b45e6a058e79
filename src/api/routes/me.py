from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile, status

from src.api.error import raise_for_error
from src.app.services.auth_provider import AuthUser
from src.app.services.avatar_storage import IAvatarStorage
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import CamelModel
from src.app.use_cases.members import (
    AvatarResponse,
    DeleteAvatarUseCase,
    GetProfileUseCase,
    ProfileResponse,
    UpdateProfileResponse,
    UpdateProfileUseCase,
    UploadAvatarUseCase,
)
from src.app.use_cases.members.avatar_use_cases import MAX_AVATAR_BYTES
from src.depends import get_avatar_storage, get_current_auth_user, get_unit_of_work

router = APIRouter(prefix="/api/me", tags=["Profile"])

PROFILE_ERROR_STATUS = {
    "NAME_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "INVALID_LOCALE": status.HTTP_400_BAD_REQUEST,
    "INVALID_FILE_TYPE": status.HTTP_400_BAD_REQUEST,
    "FILE_TOO_LARGE": status.HTTP_400_BAD_REQUEST,
    "NO_AVATAR": status.HTTP_400_BAD_REQUEST,
    "MEMBER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


class UpdateProfileRequest(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    locale: Optional[str] = None
    email_notifications: Optional[bool] = None


@router.get("", response_model=ProfileResponse)
async def get_profile(
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetProfileUseCase(uow).execute(auth_user.id)
    if result.is_err():
        raise_for_error(result.error, PROFILE_ERROR_STATUS)
    return result.value


@router.patch("", response_model=UpdateProfileResponse)
async def update_profile(
    request: UpdateProfileRequest,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateProfileUseCase(uow).execute(
        auth_user.id,
        request.first_name,
        request.last_name,
        phone=request.phone,
        locale=request.locale,
        email_notifications=request.email_notifications,
    )
    if result.is_err():
        raise_for_error(result.error, PROFILE_ERROR_STATUS)
    return result.value


@router.post("/avatar", response_model=AvatarResponse)
async def upload_avatar(
    file: UploadFile = File(...),
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IAvatarStorage = Depends(get_avatar_storage),
):
    """
    Upload Avatar

    Accepts JPEG, PNG, WebP or GIF up to 5 MB. Any previous avatar
    is removed from storage first.
    """
    # At most one byte past the limit, enough for the size check
    content = await file.read(MAX_AVATAR_BYTES + 1)
    result = await UploadAvatarUseCase(uow, storage).execute(
        auth_user.id, file.filename or "avatar", file.content_type or "", content
    )
    if result.is_err():
        raise_for_error(result.error, PROFILE_ERROR_STATUS)
    return result.value


@router.delete("/avatar", response_model=AvatarResponse)
async def delete_avatar(
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: IAvatarStorage = Depends(get_avatar_storage),
):
    result = await DeleteAvatarUseCase(uow, storage).execute(auth_user.id)
    if result.is_err():
        raise_for_error(result.error, PROFILE_ERROR_STATUS)
    return result.value
