"""
Use Cases

Organized into domain folders:
- clubs/: Club registration, tenant context, website settings
- invitations/: Invitation workflow
- members/: Member management, profile and avatar
- events/: Events and registrations
- public_site/: Public club website pages
- planning/: Event categories, Lions years and planned events

Import from subdirectories for better organization.
"""

from .clubs import (
    GetTenantContextUseCase,
    RegisterClubUseCase,
    UpdateWebsiteSettingsUseCase,
)
from .events import (
    CreateEventUseCase,
    GetEventUseCase,
    ListEventsUseCase,
    ListPublicEventsUseCase,
    RegisterForEventUseCase,
    UpdateEventUseCase,
)
from .invitations import (
    AcceptInvitationUseCase,
    CreateInvitationUseCase,
    GetInvitationUseCase,
    ListInvitationsUseCase,
    ResendInvitationUseCase,
    RevokeInvitationUseCase,
)
from .members import (
    DeleteAvatarUseCase,
    GetProfileUseCase,
    ListMembersUseCase,
    RemoveMemberUseCase,
    UpdateProfileUseCase,
    UploadAvatarUseCase,
)
from .planning import (
    AddPlannedEventUseCase,
    CreateCategoryUseCase,
    CreateLionsYearUseCase,
    DeleteCategoryUseCase,
    DeleteLionsYearUseCase,
    DeletePlannedEventUseCase,
    ExportLionsYearUseCase,
    GetLionsYearUseCase,
    ListCategoriesUseCase,
    ListLionsYearsUseCase,
    ListUpcomingPlannedEventsUseCase,
    PublishPlannedEventUseCase,
    UpdateCategoryUseCase,
    UpdateLionsYearStatusUseCase,
    UpdatePlannedEventUseCase,
)
from .public_site import GetPublicPageUseCase

__all__ = [
    # Clubs
    "RegisterClubUseCase",
    "GetTenantContextUseCase",
    "UpdateWebsiteSettingsUseCase",
    # Invitations
    "CreateInvitationUseCase",
    "ListInvitationsUseCase",
    "GetInvitationUseCase",
    "AcceptInvitationUseCase",
    "ResendInvitationUseCase",
    "RevokeInvitationUseCase",
    # Members
    "ListMembersUseCase",
    "RemoveMemberUseCase",
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "UploadAvatarUseCase",
    "DeleteAvatarUseCase",
    # Events
    "ListEventsUseCase",
    "GetEventUseCase",
    "CreateEventUseCase",
    "UpdateEventUseCase",
    "RegisterForEventUseCase",
    "ListPublicEventsUseCase",
    # Planning
    "ListCategoriesUseCase",
    "CreateCategoryUseCase",
    "UpdateCategoryUseCase",
    "DeleteCategoryUseCase",
    "ListLionsYearsUseCase",
    "GetLionsYearUseCase",
    "CreateLionsYearUseCase",
    "UpdateLionsYearStatusUseCase",
    "DeleteLionsYearUseCase",
    "ExportLionsYearUseCase",
    "AddPlannedEventUseCase",
    "UpdatePlannedEventUseCase",
    "DeletePlannedEventUseCase",
    "PublishPlannedEventUseCase",
    "ListUpcomingPlannedEventsUseCase",
    # Public site
    "GetPublicPageUseCase",
]
