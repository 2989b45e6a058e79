"""
Annual Planning Entities

Lions years and the events planned within them. A planned event becomes a
regular Event once it is published.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import LionsYearStatus, PlannedEventStatus


class LionsYear(SQLModel, table=True):
    """
    Lions year - a club's planning period, normally July 1 to June 30.

    Business Rules:
    - Activating a year archives the club's other active years
    - Archived years are read-only
    - Only draft years can be deleted; their planned events go with them
    """

    __tablename__ = "lions_years"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)

    name: str = Field(max_length=100)
    start_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    end_date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    status: LionsYearStatus = Field(default=LionsYearStatus.draft)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_lions_year_tenant_start", "tenant_id", "start_date"),)

    @property
    def is_archived(self) -> bool:
        return self.status == LionsYearStatus.archived


class PlannedEvent(SQLModel, table=True):
    """Planned event within a Lions year; always carries a category"""

    __tablename__ = "planned_events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    lions_year_id: UUID = Field(
        foreign_key="lions_years.id", nullable=False, index=True, ondelete="CASCADE"
    )

    title: str = Field(max_length=255)
    description: Optional[str] = None
    date: datetime = Field(sa_column=Column(DateTime, nullable=False))
    end_date: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )
    category_id: UUID = Field(foreign_key="event_categories.id", nullable=False, index=True)
    status: PlannedEventStatus = Field(default=PlannedEventStatus.planned)
    is_mandatory: bool = Field(default=False)
    invitation_text: Optional[str] = None
    published_event_id: Optional[UUID] = Field(default=None, foreign_key="events.id")

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
