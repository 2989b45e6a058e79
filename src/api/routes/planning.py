from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from src.api.error import raise_for_error
from src.app.services.auth_provider import AuthUser
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.planning import (
    AddPlannedEventUseCase,
    CreateLionsYearCommand,
    CreateLionsYearUseCase,
    DeleteLionsYearUseCase,
    DeletePlannedEventUseCase,
    DeleteResponse,
    ExportLionsYearUseCase,
    GetLionsYearUseCase,
    LionsYearDetail,
    LionsYearListResponse,
    LionsYearStatusCommand,
    LionsYearSummary,
    ListLionsYearsUseCase,
    ListUpcomingPlannedEventsUseCase,
    PlannedEventCommand,
    PlannedEventInfo,
    PlannedEventListResponse,
    PublishPlannedEventResponse,
    PublishPlannedEventUseCase,
    UpdateLionsYearStatusUseCase,
    UpdatePlannedEventUseCase,
)
from src.depends import get_current_auth_user, get_unit_of_work

router = APIRouter(prefix="/api/planning", tags=["Annual Planning"])

PLANNING_ERROR_STATUS = {
    "TITLE_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "DATE_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "INVALID_DATES": status.HTTP_400_BAD_REQUEST,
    "CATEGORY_NOT_FOUND": status.HTTP_400_BAD_REQUEST,
    "LIONS_YEAR_ARCHIVED": status.HTTP_400_BAD_REQUEST,
    "LIONS_YEAR_NOT_DRAFT": status.HTTP_400_BAD_REQUEST,
    "ALREADY_PUBLISHED": status.HTTP_400_BAD_REQUEST,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "MEMBER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "LIONS_YEAR_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PLANNED_EVENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "FEATURE_DISABLED": status.HTTP_404_NOT_FOUND,
}


@router.get("/years", response_model=LionsYearListResponse)
async def list_lions_years(
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListLionsYearsUseCase(uow).execute(auth_user.id)
    if result.is_err():
        raise_for_error(result.error, PLANNING_ERROR_STATUS)
    return result.value


@router.post("/years", status_code=status.HTTP_201_CREATED, response_model=LionsYearDetail)
async def create_lions_year(
    command: CreateLionsYearCommand,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Lions Year

    Creates the year and its planned events in one transaction. With
    ``setAsActive`` the club's current active year is archived.
    """
    result = await CreateLionsYearUseCase(uow).execute(auth_user.id, command)
    if result.is_err():
        raise_for_error(result.error, PLANNING_ERROR_STATUS)
    return result.value


@router.get("/years/{year_id}", response_model=LionsYearDetail)
async def get_lions_year(
    year_id: UUID,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetLionsYearUseCase(uow).execute(auth_user.id, year_id)
    if result.is_err():
        raise_for_error(result.error, PLANNING_ERROR_STATUS)
    return result.value


@router.put("/years/{year_id}/status", response_model=LionsYearSummary)
async def update_lions_year_status(
    year_id: UUID,
    command: LionsYearStatusCommand,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdateLionsYearStatusUseCase(uow).execute(auth_user.id, year_id, command)
    if result.is_err():
        raise_for_error(result.error, PLANNING_ERROR_STATUS)
    return result.value


@router.delete("/years/{year_id}", response_model=DeleteResponse)
async def delete_lions_year(
    year_id: UUID,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteLionsYearUseCase(uow).execute(auth_user.id, year_id)
    if result.is_err():
        raise_for_error(result.error, PLANNING_ERROR_STATUS)
    return result.value


@router.get("/years/{year_id}/calendar.ics")
async def export_lions_year(
    year_id: UUID,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Serve a Lions year as a downloadable ICS file"""
    result = await ExportLionsYearUseCase(uow).execute(auth_user.id, year_id)
    if result.is_err():
        raise_for_error(result.error, PLANNING_ERROR_STATUS)
    headers = {"Content-Disposition": f'attachment; filename="{result.value.filename}"'}
    return Response(content=result.value.content, media_type="text/calendar", headers=headers)


@router.post(
    "/years/{year_id}/events",
    status_code=status.HTTP_201_CREATED,
    response_model=PlannedEventInfo,
)
async def add_planned_event(
    year_id: UUID,
    command: PlannedEventCommand,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await AddPlannedEventUseCase(uow).execute(auth_user.id, year_id, command)
    if result.is_err():
        raise_for_error(result.error, PLANNING_ERROR_STATUS)
    return result.value


@router.get("/events/upcoming", response_model=PlannedEventListResponse)
async def list_upcoming_planned_events(
    limit: int = Query(3, ge=1, le=50),
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListUpcomingPlannedEventsUseCase(uow).execute(auth_user.id, limit)
    if result.is_err():
        raise_for_error(result.error, PLANNING_ERROR_STATUS)
    return result.value


@router.patch("/events/{planned_event_id}", response_model=PlannedEventInfo)
async def update_planned_event(
    planned_event_id: UUID,
    command: PlannedEventCommand,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await UpdatePlannedEventUseCase(uow).execute(auth_user.id, planned_event_id, command)
    if result.is_err():
        raise_for_error(result.error, PLANNING_ERROR_STATUS)
    return result.value


@router.delete("/events/{planned_event_id}", response_model=DeleteResponse)
async def delete_planned_event(
    planned_event_id: UUID,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeletePlannedEventUseCase(uow).execute(auth_user.id, planned_event_id)
    if result.is_err():
        raise_for_error(result.error, PLANNING_ERROR_STATUS)
    return result.value


@router.post("/events/{planned_event_id}/publish", response_model=PublishPlannedEventResponse)
async def publish_planned_event(
    planned_event_id: UUID,
    auth_user: AuthUser = Depends(get_current_auth_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Publish Planned Event

    Creates an unpublished ACTIVITY event from the planned event and marks
    it CONFIRMED. Each planned event can be published once.
    """
    result = await PublishPlannedEventUseCase(uow).execute(auth_user.id, planned_event_id)
    if result.is_err():
        raise_for_error(result.error, PLANNING_ERROR_STATUS)
    return result.value
