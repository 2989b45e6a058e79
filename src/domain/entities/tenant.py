"""
Tenant Entity

One Lions Club and the root of its isolated data partition.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, SQLModel, UniqueConstraint

from src.domain.base import utcnow


class Tenant(SQLModel, table=True):
    """
    Tenant entity - one club.

    Business Rules:
    - slug and club_number are each unique; the pair keys public subdomains
    - plan_expires_at in the past makes the tenant unresolvable
    - Never hard-deleted
    """

    __tablename__ = "tenants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    slug: str = Field(max_length=60, unique=True, index=True)
    club_number: str = Field(max_length=20, unique=True, index=True)

    features: list = Field(default_factory=list, sa_column=Column(JSON))
    settings: dict = Field(default_factory=dict, sa_column=Column(JSON))
    plan_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )

    # Public website
    website_enabled: bool = Field(default=False)
    website_title: Optional[str] = Field(default=None, max_length=255)
    website_logo: Optional[str] = None
    hero_image: Optional[str] = None
    hero_text: Optional[str] = None
    about_text: Optional[str] = None
    contact_email: Optional[str] = Field(default=None, max_length=255)
    contact_phone: Optional[str] = Field(default=None, max_length=50)
    contact_address: Optional[str] = None
    social_facebook: Optional[str] = None
    social_instagram: Optional[str] = None
    social_linkedin: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("slug", "club_number", name="uq_tenant_slug_club_number"),
    )
