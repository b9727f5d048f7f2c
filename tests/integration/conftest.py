import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.password import PasswordResetSettings
from src.depends import get_notifier, get_reset_settings, get_token_store, get_unit_of_work
from tests.fixtures.fakes import FakeClock, InMemoryTokenStore, RecordingNotifier


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


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def token_store(clock):
    return InMemoryTokenStore(clock, cooldown_seconds=60)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest_asyncio.fixture
async def client(db_session, token_store, notifier):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_token_store] = lambda: token_store
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_reset_settings] = lambda: PasswordResetSettings(
        gateway_url="https://gateway.example.com",
        reset_page_path="/oauth/password/reset_page",
        token_ttl_minutes=10,
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
