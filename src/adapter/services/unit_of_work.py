from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.password_history_repository import PasswordHistoryRepository
from src.adapter.repositories.password_policy_repository import PasswordPolicyRepository
from src.adapter.repositories.system_setting_repository import SystemSettingRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.password_policies = PasswordPolicyRepository(self.session)
        self.system_settings = SystemSettingRepository(self.session)
        self.password_histories = PasswordHistoryRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed is discarded, including on error
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
