"""
Public Page Use Case

Data for the pages of a club's public website (home, events, about, contact).
"""

from enum import Enum

from libs.result import Error, Result, Return
from src.app.services.tenant_resolver import TenantResolver
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import WEBSITE_FEATURE, is_feature_enabled
from src.app.use_cases.events import ListPublicEventsUseCase

from .dtos import PublicPageResponse, PublicSite

HOME_UPCOMING_LIMIT = 3

SITE_NOT_FOUND = Error("SITE_NOT_FOUND", "Seite nicht gefunden")


class PublicPage(str, Enum):
    home = "home"
    events = "events"
    about = "about"
    contact = "contact"


class GetPublicPageUseCase:
    """
    Business Rules:
    - The slug must resolve to a tenant with an active plan
    - The club number must match the tenant
    - The tenant must have its website enabled and the website feature on
    """

    def __init__(self, uow: UnitOfWork, resolver: TenantResolver):
        self.uow = uow
        self.resolver = resolver

    async def execute(
        self, slug: str, club_number: str, page: PublicPage = PublicPage.home
    ) -> Result[PublicPageResponse]:
        tenant = await self.resolver.resolve_by_slug(slug)
        if (
            tenant is None
            or tenant.club_number != club_number
            or not tenant.website_enabled
            or not is_feature_enabled(tenant, WEBSITE_FEATURE)
        ):
            return Return.err(SITE_NOT_FOUND)

        site = PublicSite(
            name=tenant.name,
            slug=tenant.slug,
            club_number=tenant.club_number,
            website_title=tenant.website_title,
            website_logo=tenant.website_logo,
            hero_image=tenant.hero_image,
            hero_text=tenant.hero_text,
            about_text=tenant.about_text,
            contact_email=tenant.contact_email,
            contact_phone=tenant.contact_phone,
            contact_address=tenant.contact_address,
            social_facebook=tenant.social_facebook,
            social_instagram=tenant.social_instagram,
            social_linkedin=tenant.social_linkedin,
        )

        if page == PublicPage.home:
            events = await ListPublicEventsUseCase(self.uow).execute(
                tenant.id, upcoming_limit=HOME_UPCOMING_LIMIT, include_past=False
            )
            return Return.ok(PublicPageResponse(site=site, upcoming_events=events.value.upcoming))

        if page == PublicPage.events:
            events = await ListPublicEventsUseCase(self.uow).execute(tenant.id)
            return Return.ok(
                PublicPageResponse(
                    site=site,
                    upcoming_events=events.value.upcoming,
                    past_events=events.value.past,
                )
            )

        return Return.ok(PublicPageResponse(site=site))
