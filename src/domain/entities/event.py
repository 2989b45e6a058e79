"""
Event Entities

Scheduled club activities, their categories and member registrations.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import (
    JSON,
    Column,
    DateTime,
    Field,
    Index,
    Numeric,
    SQLModel,
    UniqueConstraint,
)

from src.domain.base import utcnow

from .enums import EventVisibility, RegistrationStatus


class EventCategory(SQLModel, table=True):
    """Event type of a club, shared by events and planned events; names are unique per club"""

    __tablename__ = "event_categories"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    name: str = Field(max_length=100)
    name_en: Optional[str] = Field(default=None, max_length=100)
    color: str = Field(default="#00338D", max_length=20)
    icon: Optional[str] = Field(default=None, max_length=50)
    sort_order: int = Field(default=0)

    __table_args__ = (
        UniqueConstraint("tenant_id", "name", name="uq_event_category_tenant_name"),
    )


class Event(SQLModel, table=True):
    """
    Event entity - owned by a tenant.

    Business Rules:
    - start_date precedes end_date when both are set
    - max_participants is advisory and not enforced on registration
    - Ownership moves to the deleting admin when the creator is removed
    """

    __tablename__ = "events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)

    title: str = Field(max_length=255)
    title_en: Optional[str] = Field(default=None, max_length=255)
    description: str = Field(default="")
    description_en: Optional[str] = None
    type: str = Field(default="MEETING", max_length=50)

    start_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    end_date: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )

    location: Optional[str] = None
    location_url: Optional[str] = None
    is_online: bool = Field(default=False)
    online_url: Optional[str] = None

    # Registration policy
    registration_required: bool = Field(default=False)
    registration_deadline: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )
    max_participants: Optional[int] = None
    allow_guests: bool = Field(default=False)
    max_guests_per_member: int = Field(default=0)
    cost_member: Decimal = Field(
        default=Decimal("0"), sa_column=Column(Numeric(10, 2), nullable=False)
    )
    cost_guest: Decimal = Field(
        default=Decimal("0"), sa_column=Column(Numeric(10, 2), nullable=False)
    )

    visibility: EventVisibility = Field(default=EventVisibility.members)
    is_published: bool = Field(default=True)
    is_cancelled: bool = Field(default=False)

    category_id: Optional[UUID] = Field(default=None, foreign_key="event_categories.id")
    created_by_id: UUID = Field(foreign_key="members.id", nullable=False, index=True)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_event_tenant_start", "tenant_id", "start_date"),
        Index("idx_event_visibility", "visibility"),
    )


class EventRegistration(SQLModel, table=True):
    """One registration per (event, member)"""

    __tablename__ = "event_registrations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    event_id: UUID = Field(
        foreign_key="events.id", nullable=False, index=True, ondelete="CASCADE"
    )
    member_id: UUID = Field(
        foreign_key="members.id", nullable=False, index=True, ondelete="CASCADE"
    )

    status: RegistrationStatus = Field(default=RegistrationStatus.registered)
    guest_count: int = Field(default=0)
    guest_names: list = Field(default_factory=list, sa_column=Column(JSON))
    is_paid: bool = Field(default=False)
    total_cost: Decimal = Field(
        default=Decimal("0"), sa_column=Column(Numeric(10, 2), nullable=False)
    )

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("event_id", "member_id", name="uq_registration_event_member"),
    )
