from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.auth_provider import AuthUser, IAuthProvider
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.members import (
    ListMembersUseCase,
    MemberListResponse,
    RemoveMemberResponse,
    RemoveMemberUseCase,
)
from src.depends import get_auth_provider, get_current_auth_user, get_unit_of_work

router = APIRouter(prefix="/api/members", tags=["Members"])

MEMBER_ERROR_STATUS = {
    "CANNOT_DELETE_SELF": status.HTTP_400_BAD_REQUEST,
    "CANNOT_DELETE_LAST_ADMIN": status.HTTP_400_BAD_REQUEST,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "FORBIDDEN_TENANT": status.HTTP_403_FORBIDDEN,
    "MEMBER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


@router.get("", response_model=MemberListResponse)
async def list_members(
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListMembersUseCase(uow).execute(auth_user.id)
    if result.is_err():
        raise_for_error(result.error, MEMBER_ERROR_STATUS)
    return result.value


@router.delete("/{member_id}", response_model=RemoveMemberResponse)
async def remove_member(
    member_id: UUID,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    auth_provider: IAuthProvider = Depends(get_auth_provider),
):
    """
    Remove Member

    Deletes the auth identity, then the member row with its registrations
    and the invitations it sent. Events created by the member move to the
    deleting admin.

    Raises:
        - 400 Bad Request: CANNOT_DELETE_SELF, CANNOT_DELETE_LAST_ADMIN
        - 401 Unauthorized: no session
        - 403 Forbidden: FORBIDDEN, FORBIDDEN_TENANT
        - 404 Not Found: MEMBER_NOT_FOUND
    """
    result = await RemoveMemberUseCase(uow, auth_provider).execute(auth_user.id, member_id)
    if result.is_err():
        raise_for_error(result.error, MEMBER_ERROR_STATUS)
    return result.value
