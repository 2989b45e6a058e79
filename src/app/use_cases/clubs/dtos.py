"""
Club Use Case DTOs (Data Transfer Objects)

Command/Response classes for club registration and club settings.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.app.use_cases.common import CamelModel


class RegisterClubCommand(CamelModel):
    """
    Register club command - represents the registration form

    Created by API layer; business validation happens in the use case.
    """

    club_name: str = ""
    club_number: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    password_confirm: str = ""


class RegisteredClub(CamelModel):
    id: UUID
    name: str
    slug: str
    club_number: str


class RegisterClubResponse(CamelModel):
    success: bool = True
    tenant: RegisteredClub


class WebsiteSettingsCommand(CamelModel):
    """Public website settings as edited in the dashboard"""

    website_enabled: bool = False
    website_title: Optional[str] = None
    website_logo: Optional[str] = None
    hero_image: Optional[str] = None
    hero_text: Optional[str] = None
    about_text: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_address: Optional[str] = None
    social_facebook: Optional[str] = None
    social_instagram: Optional[str] = None
    social_linkedin: Optional[str] = None


class WebsiteSettingsResponse(CamelModel):
    success: bool = True


class TenantContext(CamelModel):
    """Current tenant as seen by a signed-in member"""

    id: UUID
    name: str
    slug: str
    club_number: str
    features: List[str]
    settings: dict
    plan_expires_at: Optional[datetime] = None
    website_enabled: bool
    website_title: Optional[str] = None
    website_logo: Optional[str] = None
    hero_image: Optional[str] = None
    hero_text: Optional[str] = None
    about_text: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    contact_address: Optional[str] = None
    social_facebook: Optional[str] = None
    social_instagram: Optional[str] = None
    social_linkedin: Optional[str] = None
