from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.auth_provider import AuthUser, IAuthProvider
from src.app.services.tenant_cache import TenantCache
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.clubs import (
    GetTenantContextUseCase,
    RegisterClubCommand,
    RegisterClubResponse,
    RegisterClubUseCase,
    TenantContext,
    UpdateWebsiteSettingsUseCase,
    WebsiteSettingsCommand,
    WebsiteSettingsResponse,
)
from src.depends import (
    get_auth_provider,
    get_config,
    get_current_auth_user,
    get_tenant_cache,
    get_unit_of_work,
)

router = APIRouter(prefix="/api", tags=["Clubs"])

CLUB_ERROR_STATUS = {
    "MISSING_FIELDS": status.HTTP_400_BAD_REQUEST,
    "INVALID_CLUB_NUMBER": status.HTTP_400_BAD_REQUEST,
    "PASSWORD_MISMATCH": status.HTTP_400_BAD_REQUEST,
    "PASSWORD_TOO_SHORT": status.HTTP_400_BAD_REQUEST,
    "CLUB_NUMBER_TAKEN": status.HTTP_400_BAD_REQUEST,
    "EMAIL_TAKEN": status.HTTP_400_BAD_REQUEST,
    "REGISTRATION_CONFLICT": status.HTTP_400_BAD_REQUEST,
    "INVALID_URL": status.HTTP_400_BAD_REQUEST,
    "INVALID_EMAIL": status.HTTP_400_BAD_REQUEST,
    "TITLE_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "MEMBER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


@router.post("/register", response_model=RegisterClubResponse)
async def register_club(
    command: RegisterClubCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    auth_provider: IAuthProvider = Depends(get_auth_provider),
    config=Depends(get_config),
):
    """
    Register Club

    Self-service onboarding: creates the tenant, its system roles and the
    first administrator, and signs the administrator up with the auth
    provider.

    Raises:
        - 400 Bad Request: MISSING_FIELDS, INVALID_CLUB_NUMBER, PASSWORD_MISMATCH,
                           PASSWORD_TOO_SHORT, CLUB_NUMBER_TAKEN, EMAIL_TAKEN
        - 500 Internal Server Error: AUTH_SIGNUP_FAILED, ROLE_NOT_FOUND
    """
    result = await RegisterClubUseCase(uow, auth_provider, config.APP_URL).execute(command)
    if result.is_err():
        raise_for_error(result.error, CLUB_ERROR_STATUS)
    return result.value


@router.get("/tenant", response_model=TenantContext)
async def get_tenant(
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTenantContextUseCase(uow).execute(auth_user.id)
    if result.is_err():
        raise_for_error(result.error, CLUB_ERROR_STATUS)
    return result.value


@router.put("/website", response_model=WebsiteSettingsResponse)
async def update_website_settings(
    command: WebsiteSettingsCommand,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    tenant_cache: TenantCache = Depends(get_tenant_cache),
):
    """Save the public website settings; cached tenant snapshots are dropped"""
    result = await UpdateWebsiteSettingsUseCase(uow, tenant_cache).execute(
        auth_user.id, command
    )
    if result.is_err():
        raise_for_error(result.error, CLUB_ERROR_STATUS)
    return result.value
