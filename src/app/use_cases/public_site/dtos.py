from typing import List, Optional

from src.app.use_cases.common import CamelModel
from src.app.use_cases.events.dtos import PublicEvent


class PublicSite(CamelModel):
    """Branding and contact data of a club website"""

    name: str
    slug: str
    club_number: str
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


class PublicPageResponse(CamelModel):
    site: PublicSite
    upcoming_events: Optional[List[PublicEvent]] = None
    past_events: Optional[List[PublicEvent]] = None
