"""
Invitation Entity

Single-use, time-bounded offers to join a tenant.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel, UniqueConstraint

from src.domain.base import utcnow

from .enums import InvitationStatus, RoleType


class Invitation(SQLModel, table=True):
    """
    Invitation entity - pending invitations to join a tenant.

    Business Rules:
    - Created by a member allowed to manage invitations
    - Expires 7 days after creation; expiry is applied lazily on read
    - Token is single-use and unguessable
    - (tenant_id, email, status) is unique, so stale expired/revoked rows
      are purged before a re-invite
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    tenant_id: UUID = Field(foreign_key="tenants.id", nullable=False, index=True)
    email: str = Field(max_length=255, nullable=False, index=True)

    role_type: RoleType = Field(default=RoleType.member, nullable=False)
    token: str = Field(unique=True, index=True, max_length=64)
    invited_by_id: UUID = Field(foreign_key="members.id", nullable=False)

    status: InvitationStatus = Field(default=InvitationStatus.pending)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    accepted_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        UniqueConstraint(
            "tenant_id", "email", "status", name="uq_invitation_tenant_email_status"
        ),
        Index("idx_invitation_expires_at", "expires_at"),
        Index("idx_invitation_status", "status"),
    )

    def is_expired(self, now: datetime) -> bool:
        # The expiry instant itself is still valid
        return now > self.expires_at
