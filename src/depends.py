from fastapi import Request, status
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.auth_provider import AuthUser, IAuthProvider
from src.app.services.avatar_storage import IAvatarStorage
from src.app.services.email_sender import IEmailSender
from src.app.services.tenant_cache import TenantCache

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_config(request: Request):
    return request.app.state.config


def get_auth_provider(request: Request) -> IAuthProvider:
    return request.app.state.auth_provider


def get_email_sender(request: Request) -> IEmailSender:
    return request.app.state.email_sender


def get_avatar_storage(request: Request) -> IAvatarStorage:
    return request.app.state.avatar_storage


def get_tenant_cache(request: Request) -> TenantCache:
    return request.app.state.tenant_cache


async def get_current_auth_user(request: Request) -> AuthUser:
    """
    Dependency returning the identity verified by the session gate.

    Raises:
        ClientError: 401 if the request carries no valid session
    """
    principal = getattr(request.state, "principal", None)
    if principal is None:
        raise ClientError(
            Error("UNAUTHORIZED", "Nicht autorisiert"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return principal
