"""
Planning Use Case DTOs (Data Transfer Objects)

Command and Response classes for event categories, Lions years and
planned events.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from src.app.use_cases.common import CamelModel
from src.app.use_cases.events.dtos import EventCategoryInfo
from src.domain.entities import LionsYearStatus, PlannedEventStatus


# ============================================================================
# Command DTOs
# ============================================================================


class CategoryCommand(CamelModel):
    """For updates only the fields present in the request are applied"""

    name: Optional[str] = None
    name_en: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None
    sort_order: Optional[int] = Field(default=None, ge=0)


class PlannedEventCommand(CamelModel):
    """For updates only the fields present in the request are applied"""

    title: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    category_id: Optional[UUID] = None
    status: Optional[PlannedEventStatus] = None
    is_mandatory: Optional[bool] = None
    invitation_text: Optional[str] = None


class CreateLionsYearCommand(CamelModel):
    """
    New Lions year with its initial planned events

    Name and dates default to the next July-to-June period. Events without a
    category are skipped.
    """

    name: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    set_as_active: bool = False
    events: List[PlannedEventCommand] = Field(default_factory=list)


class LionsYearStatusCommand(CamelModel):
    status: LionsYearStatus


# ============================================================================
# Response DTOs
# ============================================================================


class CategoryInfo(EventCategoryInfo):
    sort_order: int


class CategoryListResponse(CamelModel):
    categories: List[CategoryInfo]


class PlannedEventInfo(CamelModel):
    id: UUID
    lions_year_id: UUID
    title: str
    description: Optional[str] = None
    date: datetime
    end_date: Optional[datetime] = None
    status: PlannedEventStatus
    is_mandatory: bool
    invitation_text: Optional[str] = None
    published_event_id: Optional[UUID] = None
    category: Optional[EventCategoryInfo] = None


class LionsYearSummary(CamelModel):
    id: UUID
    name: str
    start_date: datetime
    end_date: datetime
    status: LionsYearStatus
    planned_event_count: int = 0
    created_at: datetime
    updated_at: datetime


class LionsYearListResponse(CamelModel):
    years: List[LionsYearSummary]


class LionsYearDetail(LionsYearSummary):
    planned_events: List[PlannedEventInfo] = Field(default_factory=list)


class PlannedEventListResponse(CamelModel):
    events: List[PlannedEventInfo]


class PublishPlannedEventResponse(CamelModel):
    success: bool = True
    published_event_id: UUID


class DeleteResponse(CamelModel):
    success: bool = True
