"""
Member Management Use Cases

Member list, deletion, own profile and avatar.
"""

from .avatar_use_cases import DeleteAvatarUseCase, UploadAvatarUseCase
from .dtos import (
    AvatarResponse,
    MemberListResponse,
    MemberSummary,
    ProfileResponse,
    RemoveMemberResponse,
    RoleInfo,
    UpdatedProfile,
    UpdateProfileResponse,
)
from .list_members_use_case import ListMembersUseCase
from .profile_use_cases import GetProfileUseCase, UpdateProfileUseCase
from .remove_member_use_case import RemoveMemberUseCase

__all__ = [
    "RemoveMemberUseCase",
    "ListMembersUseCase",
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "UploadAvatarUseCase",
    "DeleteAvatarUseCase",
    "RemoveMemberResponse",
    "MemberListResponse",
    "MemberSummary",
    "RoleInfo",
    "ProfileResponse",
    "UpdatedProfile",
    "UpdateProfileResponse",
    "AvatarResponse",
]
