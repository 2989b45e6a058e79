"""
Tenant Resolver Middleware

Maps the request host onto a tenant. Club subdomains
(``{slug}-{clubNumber}.lions-hub.de``) are rewritten to the internal public
site routes; every other host takes the tenant slug from the ``tenant``
query parameter with a configured fallback.
"""

import logging
from typing import Callable, Iterable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.domain.hosts import ClubSubdomain, classify_host

from .paths import is_static_asset, replace_request_headers

logger = logging.getLogger(__name__)


def public_site_path(slug: str, club_number: str, path: str) -> str:
    suffix = "" if path == "/" else path
    return f"/public/{slug}/{club_number}{suffix}"


class TenantResolverMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app,
        *,
        main_domain: Optional[str],
        app_subdomains: Iterable[str],
        default_tenant_slug: str,
    ):
        super().__init__(app)
        self.main_domain = main_domain
        self.app_subdomains = tuple(app_subdomains)
        self.default_tenant_slug = default_tenant_slug

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if is_static_asset(request.url.path):
            return await call_next(request)

        host = request.headers.get("host", "localhost")
        host_class = classify_host(host, self.main_domain, self.app_subdomains)

        if isinstance(host_class, ClubSubdomain):
            path = public_site_path(host_class.slug, host_class.club_number, request.url.path)
            request.scope["path"] = path
            request.scope["raw_path"] = path.encode("utf-8")
            tags = {
                "x-tenant-slug": host_class.slug,
                "x-club-number": host_class.club_number,
                "x-is-public-site": "true",
            }
            logger.debug(f"Rewrote {host}{request.url.path} to {path}")
        else:
            slug = request.query_params.get("tenant") or self.default_tenant_slug
            tags = {"x-tenant-slug": slug, "x-is-public-site": "false"}

        replace_request_headers(request.scope, tags)

        response = await call_next(request)
        for name, value in tags.items():
            response.headers[name] = value
        return response
