from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.app.services.auth_provider import AuthUser
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.events import (
    CreateEventUseCase,
    EventCommand,
    EventDetail,
    EventListResponse,
    GetEventUseCase,
    ListEventsUseCase,
    RegisterForEventUseCase,
    RegistrationCommand,
    RegistrationInfo,
    UpdateEventUseCase,
)
from src.depends import get_current_auth_user, get_unit_of_work

router = APIRouter(prefix="/api/events", tags=["Events"])

EVENT_ERROR_STATUS = {
    "INVALID_FILTER": status.HTTP_400_BAD_REQUEST,
    "TITLE_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "START_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "INVALID_DATES": status.HTTP_400_BAD_REQUEST,
    "CATEGORY_NOT_FOUND": status.HTTP_400_BAD_REQUEST,
    "EVENT_CANCELLED": status.HTTP_400_BAD_REQUEST,
    "REGISTRATION_CLOSED": status.HTTP_400_BAD_REQUEST,
    "GUESTS_NOT_ALLOWED": status.HTTP_400_BAD_REQUEST,
    "TOO_MANY_GUESTS": status.HTTP_400_BAD_REQUEST,
    "INVALID_GUEST_NAMES": status.HTTP_400_BAD_REQUEST,
    "REGISTRATION_CONFLICT": status.HTTP_400_BAD_REQUEST,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "MEMBER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "EVENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "FEATURE_DISABLED": status.HTTP_404_NOT_FOUND,
}


@router.get("", response_model=EventListResponse)
async def list_events(
    filter: str = Query("upcoming"),
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Events of the member's club, limited to the visibility tiers they may see"""
    result = await ListEventsUseCase(uow).execute(auth_user.id, filter)
    if result.is_err():
        raise_for_error(result.error, EVENT_ERROR_STATUS)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EventDetail)
async def create_event(
    command: EventCommand,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await CreateEventUseCase(uow).execute(auth_user.id, command)
    if result.is_err():
        raise_for_error(result.error, EVENT_ERROR_STATUS)
    return result.value


@router.get("/{event_id}", response_model=EventDetail)
async def get_event(
    event_id: UUID,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetEventUseCase(uow).execute(auth_user.id, event_id)
    if result.is_err():
        raise_for_error(result.error, EVENT_ERROR_STATUS)
    return result.value


@router.patch("/{event_id}", response_model=EventDetail)
async def update_event(
    event_id: UUID,
    command: EventCommand,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateEventUseCase(uow).execute(auth_user.id, event_id, command)
    if result.is_err():
        raise_for_error(result.error, EVENT_ERROR_STATUS)
    return result.value


@router.put("/{event_id}/registration", response_model=RegistrationInfo)
async def register_for_event(
    event_id: UUID,
    command: RegistrationCommand,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register for Event

    Creates or updates the caller's registration. Capacity is advisory:
    a full event still accepts registrations.

    Raises:
        - 400 Bad Request: EVENT_CANCELLED, REGISTRATION_CLOSED, GUESTS_NOT_ALLOWED,
                           TOO_MANY_GUESTS, INVALID_GUEST_NAMES
        - 403 Forbidden: FORBIDDEN (no events.register permission)
        - 404 Not Found: EVENT_NOT_FOUND, also for events hidden from the caller
    """
    result = await RegisterForEventUseCase(uow).execute(auth_user.id, event_id, command)
    if result.is_err():
        raise_for_error(result.error, EVENT_ERROR_STATUS)
    return result.value
