"""
Public club website routes

Club subdomains reach these routes through the tenant resolver rewrite
(``lions-lauf-123456.lions-hub.de/events`` becomes
``/public/lions-lauf/123456/events``). No session is required.
"""

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.tenant_cache import TenantCache
from src.app.services.tenant_resolver import TenantResolver
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.public_site import GetPublicPageUseCase, PublicPage, PublicPageResponse
from src.depends import get_tenant_cache, get_unit_of_work

router = APIRouter(prefix="/public/{slug}/{club_number}", tags=["Public Website"])

PUBLIC_ERROR_STATUS = {"SITE_NOT_FOUND": status.HTTP_404_NOT_FOUND}


async def render_page(
    slug: str, club_number: str, page: PublicPage, uow: UnitOfWork, cache: TenantCache
) -> PublicPageResponse:
    resolver = TenantResolver(uow, cache)
    result = await GetPublicPageUseCase(uow, resolver).execute(slug, club_number, page)
    if result.is_err():
        raise_for_error(result.error, PUBLIC_ERROR_STATUS)
    return result.value


@router.get("", response_model=PublicPageResponse, response_model_exclude_none=True)
async def home_page(
    slug: str,
    club_number: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: TenantCache = Depends(get_tenant_cache),
):
    return await render_page(slug, club_number, PublicPage.home, uow, cache)


@router.get("/events", response_model=PublicPageResponse, response_model_exclude_none=True)
async def events_page(
    slug: str,
    club_number: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: TenantCache = Depends(get_tenant_cache),
):
    return await render_page(slug, club_number, PublicPage.events, uow, cache)


@router.get("/about", response_model=PublicPageResponse, response_model_exclude_none=True)
async def about_page(
    slug: str,
    club_number: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: TenantCache = Depends(get_tenant_cache),
):
    return await render_page(slug, club_number, PublicPage.about, uow, cache)


@router.get("/contact", response_model=PublicPageResponse, response_model_exclude_none=True)
async def contact_page(
    slug: str,
    club_number: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    cache: TenantCache = Depends(get_tenant_cache),
):
    return await render_page(slug, club_number, PublicPage.contact, uow, cache)
