from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import PasswordHistory


class IPasswordHistoryRepository(ABC):
    """PasswordHistory repository interface - application layer"""

    @abstractmethod
    async def create(self, entry: PasswordHistory) -> PasswordHistory:
        """Record a password the user has set"""
        pass

    @abstractmethod
    async def get_recent_by_user_id(self, user_id: UUID, limit: int) -> List[PasswordHistory]:
        """Get the user's most recent password records, newest first"""
        pass
