from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.http_notifier import HttpNotifier
from src.adapter.services.redis_token_store import RedisTokenStore
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.notifier import INotifier
from src.app.services.token_store import ITokenStore
from src.app.use_cases.password import PasswordResetSettings

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

redis_client = Redis.from_url(ApplicationConfig.REDIS_URL, decode_responses=True)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_store() -> ITokenStore:
    return RedisTokenStore(
        redis_client, cooldown_seconds=ApplicationConfig.RESET_COOLDOWN_SECONDS
    )


def get_notifier() -> INotifier:
    return HttpNotifier(
        ApplicationConfig.NOTIFY_SERVICE_URL,
        timeout_seconds=ApplicationConfig.NOTIFY_TIMEOUT_SECONDS,
    )


def get_reset_settings() -> PasswordResetSettings:
    return PasswordResetSettings.from_config(ApplicationConfig)
