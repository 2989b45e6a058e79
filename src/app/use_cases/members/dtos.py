"""
Member Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.app.use_cases.common import CamelModel


class RoleInfo(CamelModel):
    type: str
    name: str


class MemberSummary(CamelModel):
    """Member row on the user-management page"""

    id: UUID
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    is_active: bool
    status: str
    role: Optional[RoleInfo] = None
    created_at: datetime


class MemberListResponse(CamelModel):
    members: List[MemberSummary]


class RemoveMemberResponse(CamelModel):
    """Response for remove member use case"""

    success: bool = True


class ProfileResponse(CamelModel):
    id: UUID
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    locale: str
    email_notifications: bool
    avatar_url: Optional[str] = None
    role: Optional[RoleInfo] = None
    tenant_name: str


class UpdatedProfile(CamelModel):
    id: UUID
    first_name: str
    last_name: str
    phone: Optional[str] = None
    locale: str
    email_notifications: bool


class UpdateProfileResponse(CamelModel):
    success: bool = True
    member: UpdatedProfile


class AvatarResponse(CamelModel):
    success: bool = True
    avatar_url: Optional[str] = None
