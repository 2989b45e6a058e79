"""
Planning Use Cases

Event categories, Lions years, planned events, publishing planned events
as club events and the iCalendar export of a year.
"""

from .calendar_export import CalendarFile, ExportLionsYearUseCase, build_calendar
from .category_use_cases import (
    CreateCategoryUseCase,
    DeleteCategoryUseCase,
    ListCategoriesUseCase,
    UpdateCategoryUseCase,
)
from .dtos import (
    CategoryCommand,
    CategoryInfo,
    CategoryListResponse,
    CreateLionsYearCommand,
    DeleteResponse,
    LionsYearDetail,
    LionsYearListResponse,
    LionsYearStatusCommand,
    LionsYearSummary,
    PlannedEventCommand,
    PlannedEventInfo,
    PlannedEventListResponse,
    PublishPlannedEventResponse,
)
from .lions_year_use_cases import (
    CreateLionsYearUseCase,
    DeleteLionsYearUseCase,
    GetLionsYearUseCase,
    ListLionsYearsUseCase,
    UpdateLionsYearStatusUseCase,
    default_end_date,
    default_start_date,
    default_year_name,
)
from .planned_event_use_cases import (
    AddPlannedEventUseCase,
    DeletePlannedEventUseCase,
    ListUpcomingPlannedEventsUseCase,
    PublishPlannedEventUseCase,
    UpdatePlannedEventUseCase,
)

__all__ = [
    "ListCategoriesUseCase",
    "CreateCategoryUseCase",
    "UpdateCategoryUseCase",
    "DeleteCategoryUseCase",
    "ListLionsYearsUseCase",
    "GetLionsYearUseCase",
    "CreateLionsYearUseCase",
    "UpdateLionsYearStatusUseCase",
    "DeleteLionsYearUseCase",
    "AddPlannedEventUseCase",
    "UpdatePlannedEventUseCase",
    "DeletePlannedEventUseCase",
    "PublishPlannedEventUseCase",
    "ListUpcomingPlannedEventsUseCase",
    "ExportLionsYearUseCase",
    "CalendarFile",
    "build_calendar",
    "default_start_date",
    "default_end_date",
    "default_year_name",
    "CategoryCommand",
    "CategoryInfo",
    "CategoryListResponse",
    "CreateLionsYearCommand",
    "LionsYearStatusCommand",
    "LionsYearSummary",
    "LionsYearDetail",
    "LionsYearListResponse",
    "PlannedEventCommand",
    "PlannedEventInfo",
    "PlannedEventListResponse",
    "PublishPlannedEventResponse",
    "DeleteResponse",
]
