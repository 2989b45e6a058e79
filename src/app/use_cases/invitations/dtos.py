"""
Invitation Use Case DTOs (Data Transfer Objects)

All Response classes for the invitation workflow.
"""

from datetime import datetime
from typing import List
from uuid import UUID

from src.app.use_cases.common import CamelModel


# ============================================================================
# Response DTOs
# ============================================================================


class CreatedInvitation(CamelModel):
    id: UUID
    email: str
    expires_at: datetime
    invite_url: str


class CreateInvitationResponse(CamelModel):
    """Response for create invitation use case"""

    success: bool = True
    email_sent: bool
    invitation: CreatedInvitation


class InvitationSummary(CamelModel):
    """Pending invitation row on the user-management page"""

    id: UUID
    email: str
    role_type: str
    role_name: str
    invited_by_name: str
    expires_at: datetime
    created_at: datetime
    is_expired: bool


class InvitationListResponse(CamelModel):
    invitations: List[InvitationSummary]


class InvitationDetails(CamelModel):
    """Public view of an invitation; never carries the token"""

    id: UUID
    email: str
    tenant_name: str
    role_name: str
    invited_by_name: str
    expires_at: datetime


class AcceptInvitationResponse(CamelModel):
    success: bool = True


class ResendInvitationResponse(CamelModel):
    """Response for resend invitation use case"""

    success: bool = True
    email_sent: bool
    days_remaining: int


class RevokeInvitationResponse(CamelModel):
    success: bool = True
