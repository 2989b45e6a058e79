"""
Member Entity

A user account scoped to exactly one tenant.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel, UniqueConstraint

from src.domain.base import utcnow

from .enums import MemberStatus


class Member(SQLModel, table=True):
    """
    Member entity - belongs to one tenant.

    Business Rules:
    - (tenant_id, email) is unique; email stored lower-cased
    - auth_user_id, once linked, identifies exactly one member
    - Deleting a member reassigns authored events, deletes authored
      invitations and cascades registrations
    """

    __tablename__ = "members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    auth_user_id: Optional[str] = Field(default=None, max_length=64, unique=True)

    email: str = Field(max_length=255, nullable=False)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    phone: Optional[str] = Field(default=None, max_length=50)
    locale: str = Field(default="de", max_length=5)
    email_notifications: bool = Field(default=True)
    avatar_url: Optional[str] = None

    is_active: bool = Field(default=True)
    status: MemberStatus = Field(default=MemberStatus.active)
    role_id: Optional[UUID] = Field(default=None, foreign_key="roles.id")

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint("tenant_id", "email", name="uq_member_tenant_email"),
        Index("idx_member_status", "status"),
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
