from abc import ABC, abstractmethod

from src.app.repositories.password_history_repository import IPasswordHistoryRepository
from src.app.repositories.password_policy_repository import IPasswordPolicyRepository
from src.app.repositories.system_setting_repository import ISystemSettingRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    password_policies: IPasswordPolicyRepository
    system_settings: ISystemSettingRepository
    password_histories: IPasswordHistoryRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
