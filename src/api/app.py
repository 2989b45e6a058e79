import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.adapter.services.resend_email_sender import ResendEmailSender
from src.adapter.services.supabase_auth_provider import SupabaseAuthProvider
from src.adapter.services.supabase_avatar_storage import SupabaseAvatarStorage
from src.app.services.tenant_cache import TenantCache

from .error import ClientError, ServerError
from .middleware.session_gate import SessionGateMiddleware
from .middleware.tenant_resolver import TenantResolverMiddleware

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    content = {"error": exc.base_error.message, "code": exc.base_error.code}
    if exc.base_error.details:
        content["details"] = exc.base_error.details
    logger.warning(f"Client error on {request.url.path}: {exc.base_error.code}")
    return JSONResponse(status_code=exc.status_code, content=content)


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(
        f"Server error on {request.url.path}: {exc.base_error.code} {exc.base_error.message}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Interner Serverfehler", "code": exc.base_error.code},
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Ungültige Anfrage", "code": "VALIDATION_ERROR", "details": details},
    )


def build_services(ApplicationConfig) -> dict:
    """Default adapters for the external services, built from configuration"""
    return {
        "auth_provider": SupabaseAuthProvider(
            ApplicationConfig.SUPABASE_URL,
            ApplicationConfig.SUPABASE_ANON_KEY,
            ApplicationConfig.SUPABASE_SERVICE_ROLE_KEY,
            ApplicationConfig.SUPABASE_JWT_SECRET,
        ),
        "email_sender": ResendEmailSender(
            ApplicationConfig.RESEND_API_KEY,
            ApplicationConfig.FROM_EMAIL,
            api_url=ApplicationConfig.RESEND_API_URL,
        ),
        "avatar_storage": SupabaseAvatarStorage(
            ApplicationConfig.SUPABASE_URL,
            ApplicationConfig.SUPABASE_SERVICE_ROLE_KEY,
            ApplicationConfig.AVATAR_BUCKET,
        ),
        "tenant_cache": TenantCache(ttl=ApplicationConfig.TENANT_CACHE_TTL),
    }


def create_app(ApplicationConfig, **services) -> FastAPI:
    """
    Build the application.

    Keyword arguments override the default service adapters
    (``auth_provider``, ``email_sender``, ``avatar_storage``, ``tenant_cache``).
    """
    app = FastAPI(title="Lions Hub API", version="0.1.0")

    app.state.config = ApplicationConfig
    for name, service in {**build_services(ApplicationConfig), **services}.items():
        setattr(app.state, name, service)

    # Last added runs first: tenant rewrite, then session gate, then CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionGateMiddleware,
        default_locale=ApplicationConfig.DEFAULT_LOCALE,
        secure_cookies=ApplicationConfig.SESSION_COOKIE_SECURE,
    )
    app.add_middleware(
        TenantResolverMiddleware,
        main_domain=ApplicationConfig.MAIN_DOMAIN,
        app_subdomains=ApplicationConfig.APP_SUBDOMAINS,
        default_tenant_slug=ApplicationConfig.DEFAULT_TENANT_SLUG,
    )

    from src.api.routes import (
        category,
        club,
        event,
        health,
        invitation,
        me,
        member,
        planning,
        public,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(club.router)
    app.include_router(invitation.router)
    app.include_router(member.router)
    app.include_router(me.router)
    app.include_router(event.router)
    app.include_router(category.router)
    app.include_router(planning.router)
    app.include_router(public.router)

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    return app
