"""
Club Use Cases

Club registration, website settings and the current tenant context.
"""

from .dtos import (
    RegisterClubCommand,
    RegisterClubResponse,
    RegisteredClub,
    TenantContext,
    WebsiteSettingsCommand,
    WebsiteSettingsResponse,
)
from .register_club_use_case import RegisterClubUseCase, generate_slug
from .tenant_context_use_case import GetTenantContextUseCase
from .website_settings_use_case import UpdateWebsiteSettingsUseCase

__all__ = [
    "RegisterClubUseCase",
    "UpdateWebsiteSettingsUseCase",
    "GetTenantContextUseCase",
    "generate_slug",
    "RegisterClubCommand",
    "RegisterClubResponse",
    "RegisteredClub",
    "WebsiteSettingsCommand",
    "WebsiteSettingsResponse",
    "TenantContext",
]
