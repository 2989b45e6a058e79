import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.tenant_cache import TenantCache
from src.depends import get_unit_of_work
from tests.fixtures.fakes import FakeAuthProvider, FakeAvatarStorage, FakeEmailSender
from tests.fixtures.json_loader import TestDataLoader


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def auth_provider():
    return FakeAuthProvider()


@pytest_asyncio.fixture
def email_sender():
    return FakeEmailSender()


@pytest_asyncio.fixture
def avatar_storage():
    return FakeAvatarStorage()


@pytest_asyncio.fixture
async def app(db_session, auth_provider, email_sender, avatar_storage):
    from config import ApplicationConfig
    from src.api.app import create_app

    app = create_app(
        ApplicationConfig,
        auth_provider=auth_provider,
        email_sender=email_sender,
        avatar_storage=avatar_storage,
        tenant_cache=TenantCache(ttl=60),
    )

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
