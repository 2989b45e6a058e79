from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import Field

from src.api.error import raise_for_error
from src.app.services.auth_provider import AuthUser
from src.app.services.email_sender import IEmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import CamelModel
from src.app.use_cases.invitations import (
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    CreateInvitationResponse,
    CreateInvitationUseCase,
    GetInvitationUseCase,
    InvitationDetails,
    InvitationListResponse,
    ListInvitationsUseCase,
    ResendInvitationResponse,
    ResendInvitationUseCase,
    RevokeInvitationResponse,
    RevokeInvitationUseCase,
)
from src.domain.entities import RoleType
from src.depends import get_config, get_current_auth_user, get_email_sender, get_unit_of_work

router = APIRouter(prefix="/api/invitations", tags=["Invitations"])

INVITATION_ERROR_STATUS = {
    "EMAIL_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "INVALID_ROLE": status.HTTP_400_BAD_REQUEST,
    "MISSING_DATA": status.HTTP_400_BAD_REQUEST,
    "INVITE_ALREADY_EXISTS": status.HTTP_400_BAD_REQUEST,
    "MEMBER_ALREADY_EXISTS": status.HTTP_400_BAD_REQUEST,
    "INVITATION_INVALID": status.HTTP_400_BAD_REQUEST,
    "INVITATION_EXPIRED": status.HTTP_400_BAD_REQUEST,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "FORBIDDEN_TENANT": status.HTTP_403_FORBIDDEN,
    "MEMBER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVITATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


class CreateInvitationRequest(CamelModel):
    """
    Create invitation HTTP request payload

    The email is validated by the use case so that an empty value yields
    EMAIL_REQUIRED rather than a generic validation error.
    """

    email: str = ""
    role_type: str = Field(default=RoleType.member.value)


class AcceptInvitationRequest(CamelModel):
    """Sent by the invite page right after the invitee signed up"""

    auth_user_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


@router.get("", response_model=InvitationListResponse)
async def list_invitations(
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """List the tenant's pending invitations (requires invitation management rights)"""
    result = await ListInvitationsUseCase(uow).execute(auth_user.id)
    if result.is_err():
        raise_for_error(result.error, INVITATION_ERROR_STATUS)
    return result.value


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=CreateInvitationResponse,
)
async def create_invitation(
    request: CreateInvitationRequest,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: IEmailSender = Depends(get_email_sender),
    config=Depends(get_config),
):
    """
    Create Invitation

    Stores a pending invitation and emails the invite link. A failed email
    does not fail the request; the response reports ``emailSent: false``.

    Raises:
        - 400 Bad Request: EMAIL_REQUIRED, INVALID_ROLE, INVITE_ALREADY_EXISTS,
                           MEMBER_ALREADY_EXISTS
        - 401 Unauthorized: no session
        - 403 Forbidden: FORBIDDEN
        - 404 Not Found: MEMBER_NOT_FOUND
    """
    use_case = CreateInvitationUseCase(
        uow, email_sender, config.APP_URL, expiry_days=config.INVITATION_EXPIRY_DAYS
    )
    result = await use_case.execute(auth_user.id, request.email, request.role_type)
    if result.is_err():
        raise_for_error(result.error, INVITATION_ERROR_STATUS)
    return result.value


@router.get("/{token}", response_model=InvitationDetails)
async def get_invitation(token: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Public invitation lookup by token or id; the token is never echoed back"""
    result = await GetInvitationUseCase(uow).execute(token)
    if result.is_err():
        raise_for_error(result.error, INVITATION_ERROR_STATUS)
    return result.value


@router.post(
    "/{token}/accept",
    response_model=AcceptInvitationResponse,
)
async def accept_invitation(
    token: str,
    request: AcceptInvitationRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invitation

    Creates the member for the freshly signed-up identity and marks the
    invitation accepted. Safe against double submission: only one request
    can move the invitation out of ``pending``.
    """
    result = await AcceptInvitationUseCase(uow).execute(
        token, request.auth_user_id, request.first_name, request.last_name
    )
    if result.is_err():
        raise_for_error(result.error, INVITATION_ERROR_STATUS)
    return result.value


@router.post("/{token}", response_model=ResendInvitationResponse)
async def resend_invitation(
    token: str,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: IEmailSender = Depends(get_email_sender),
    config=Depends(get_config),
):
    """Re-send the invite email for a pending invitation"""
    result = await ResendInvitationUseCase(uow, email_sender, config.APP_URL).execute(
        auth_user.id, token
    )
    if result.is_err():
        raise_for_error(result.error, INVITATION_ERROR_STATUS)
    return result.value


@router.delete("/{token}", response_model=RevokeInvitationResponse)
async def revoke_invitation(
    token: str,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await RevokeInvitationUseCase(uow).execute(auth_user.id, token)
    if result.is_err():
        raise_for_error(result.error, INVITATION_ERROR_STATUS)
    return result.value
