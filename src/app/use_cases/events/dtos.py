"""
Event Use Case DTOs (Data Transfer Objects)

Command and Response classes for events and registrations.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from src.app.use_cases.common import CamelModel
from src.domain.entities import EventVisibility, RegistrationStatus


# ============================================================================
# Command DTOs
# ============================================================================


class EventCommand(CamelModel):
    """
    Event fields as submitted by the editor

    For updates only the fields present in the request are applied.
    """

    title: Optional[str] = None
    title_en: Optional[str] = None
    description: Optional[str] = None
    description_en: Optional[str] = None
    type: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    location_url: Optional[str] = None
    is_online: Optional[bool] = None
    online_url: Optional[str] = None
    registration_required: Optional[bool] = None
    registration_deadline: Optional[datetime] = None
    max_participants: Optional[int] = Field(default=None, ge=1)
    allow_guests: Optional[bool] = None
    max_guests_per_member: Optional[int] = Field(default=None, ge=0)
    cost_member: Optional[Decimal] = Field(default=None, ge=0)
    cost_guest: Optional[Decimal] = Field(default=None, ge=0)
    visibility: Optional[EventVisibility] = None
    is_published: Optional[bool] = None
    is_cancelled: Optional[bool] = None
    category_id: Optional[UUID] = None


class RegistrationCommand(CamelModel):
    status: RegistrationStatus = RegistrationStatus.registered
    guest_count: int = Field(default=0, ge=0)
    guest_names: List[str] = Field(default_factory=list)


# ============================================================================
# Response DTOs
# ============================================================================


class EventCategoryInfo(CamelModel):
    id: UUID
    name: str
    name_en: Optional[str] = None
    color: str
    icon: Optional[str] = None


class EventSummary(CamelModel):
    id: UUID
    title: str
    title_en: Optional[str] = None
    type: str
    start_date: datetime
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    is_online: bool
    visibility: EventVisibility
    is_cancelled: bool
    registration_required: bool
    max_participants: Optional[int] = None
    category: Optional[EventCategoryInfo] = None
    registration_count: int = 0


class EventListResponse(CamelModel):
    events: List[EventSummary]


class RegistrationInfo(CamelModel):
    id: UUID
    member_id: UUID
    member_name: str
    status: RegistrationStatus
    guest_count: int
    guest_names: List[str]
    is_paid: bool
    total_cost: Decimal


class EventDetail(EventSummary):
    description: str
    description_en: Optional[str] = None
    location_url: Optional[str] = None
    online_url: Optional[str] = None
    registration_deadline: Optional[datetime] = None
    allow_guests: bool
    max_guests_per_member: int
    cost_member: Decimal
    cost_guest: Decimal
    is_published: bool
    created_by_id: UUID
    registrations: List[RegistrationInfo] = Field(default_factory=list)


class PublicEvent(CamelModel):
    """Event as shown on a club's public website"""

    id: UUID
    title: str
    title_en: Optional[str] = None
    description: str
    description_en: Optional[str] = None
    type: str
    start_date: datetime
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    location_url: Optional[str] = None
    is_online: bool
    is_cancelled: bool
    category: Optional[EventCategoryInfo] = None


class PublicEventsResponse(CamelModel):
    upcoming: List[PublicEvent]
    past: List[PublicEvent] = Field(default_factory=list)
