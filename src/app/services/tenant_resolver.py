import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional
from uuid import UUID

from src.app.services.tenant_cache import TENANT_TAG, TenantCache
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Tenant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TenantSnapshot:
    """Detached copy of a tenant row, safe to keep across sessions"""

    id: UUID
    name: str
    slug: str
    club_number: str
    features: List[str] = field(default_factory=list)
    plan_expires_at: Optional[datetime] = None
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

    @classmethod
    def from_entity(cls, tenant: Tenant) -> "TenantSnapshot":
        return cls(
            id=tenant.id,
            name=tenant.name,
            slug=tenant.slug,
            club_number=tenant.club_number,
            features=list(tenant.features or []),
            plan_expires_at=tenant.plan_expires_at,
            website_enabled=tenant.website_enabled,
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

    def is_plan_expired(self, now: datetime) -> bool:
        return self.plan_expires_at is not None and self.plan_expires_at < now


class TenantResolver:
    """
    Resolves tenants by slug through the tenant cache.

    Tenants whose plan has expired are never returned. The expiry check runs on
    every call so a cached tenant stops resolving the moment its plan lapses.
    Unknown slugs are cached as misses for the same TTL.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        cache: TenantCache[TenantSnapshot],
        now: Callable = utcnow,
    ):
        self.uow = uow
        self.cache = cache
        self.now = now

    async def resolve_by_slug(self, slug: str) -> Optional[TenantSnapshot]:
        entry = self.cache.get(slug)
        if entry is not None:
            tenant = entry.value
        else:
            async with self.uow:
                row = await self.uow.tenants.get_by_slug(slug)
                tenant = TenantSnapshot.from_entity(row) if row else None
            self.cache.set(slug, tenant, tags=(TENANT_TAG,))

        if tenant is None:
            return None
        if tenant.is_plan_expired(self.now()):
            logger.info(f"Tenant '{slug}' not resolved: plan expired at {tenant.plan_expires_at}")
            return None
        return tenant
