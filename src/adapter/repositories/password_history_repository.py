from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.password_history_repository import IPasswordHistoryRepository
from src.domain.entities import PasswordHistory


class PasswordHistoryRepository(IPasswordHistoryRepository):
    """PasswordHistory repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: PasswordHistory) -> PasswordHistory:
        """Record a password the user has set"""
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def get_recent_by_user_id(self, user_id: UUID, limit: int) -> List[PasswordHistory]:
        """Get the user's most recent password records, newest first"""
        stmt = (
            select(PasswordHistory)
            .where(PasswordHistory.user_id == user_id)
            .order_by(PasswordHistory.created_at.desc())
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())
