import logging
import re
from typing import Optional
from urllib.parse import urlparse

from libs.result import Error, Result, Return
from src.app.services.permission_evaluator import PermissionEvaluator
from src.app.services.tenant_cache import TENANT_TAG, TenantCache
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import MEMBER_NOT_FOUND, load_actor
from src.domain.permissions import PermissionCode

from .dtos import WebsiteSettingsCommand, WebsiteSettingsResponse

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

URL_FIELDS = (
    ("website_logo", "Website-Logo"),
    ("hero_image", "Hero-Bild"),
    ("social_facebook", "Facebook-URL"),
    ("social_instagram", "Instagram-URL"),
    ("social_linkedin", "LinkedIn-URL"),
)

TEXT_FIELDS = (
    "website_title",
    "website_logo",
    "hero_image",
    "hero_text",
    "about_text",
    "contact_email",
    "contact_phone",
    "contact_address",
    "social_facebook",
    "social_instagram",
    "social_linkedin",
)


def validate_url(url: Optional[str], field_name: str) -> Optional[str]:
    """Error message for an invalid URL; relative paths are allowed"""
    if not url or url.startswith("/"):
        return None
    parsed = urlparse(url)
    if parsed.scheme and parsed.netloc:
        return None
    return f"{field_name} muss eine gültige URL sein"


class UpdateWebsiteSettingsUseCase:
    """
    Business Rules:
    - Requires website.edit
    - Logo, hero image and social links must be URLs or site-relative paths
    - Contact email must look like an email address
    - A title is required while the website is enabled
    - Cached tenants are invalidated after the update
    """

    def __init__(self, uow: UnitOfWork, tenant_cache: TenantCache):
        self.uow = uow
        self.tenant_cache = tenant_cache

    async def execute(
        self, auth_user_id: str, command: WebsiteSettingsCommand
    ) -> Result[WebsiteSettingsResponse]:
        for field_name, label in URL_FIELDS:
            message = validate_url(getattr(command, field_name), label)
            if message:
                return Return.err(Error("INVALID_URL", message))

        if command.contact_email and not EMAIL_PATTERN.match(command.contact_email):
            return Return.err(Error("INVALID_EMAIL", "Ungültige E-Mail-Adresse"))

        if command.website_enabled and not (command.website_title or "").strip():
            return Return.err(
                Error(
                    "TITLE_REQUIRED",
                    "Website-Titel ist erforderlich wenn die Website aktiviert ist",
                )
            )

        async with self.uow:
            actor = await load_actor(self.uow, auth_user_id)
            if actor is None:
                return Return.err(MEMBER_NOT_FOUND)

            permissions = await PermissionEvaluator(self.uow).permissions_for(actor)
            if not permissions.has(PermissionCode.website_edit):
                return Return.err(Error("FORBIDDEN", "Keine Berechtigung"))

            tenant = await self.uow.tenants.get_by_id(actor.tenant_id)
            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Club nicht gefunden"))

            tenant.website_enabled = command.website_enabled
            for field_name in TEXT_FIELDS:
                setattr(tenant, field_name, getattr(command, field_name) or None)

            await self.uow.tenants.update(tenant)
            await self.uow.commit()

        self.tenant_cache.invalidate_tag(TENANT_TAG)
        logger.info(f"Website settings updated for tenant {actor.tenant_id}")
        return Return.ok(WebsiteSettingsResponse())
