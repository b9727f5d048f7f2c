from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update_credentials(self, user_id: UUID, password_hash: str) -> Optional[User]:
        """Replace the user's password hash; None when no such user exists"""
        user = await self.get_by_id(user_id)
        if user is None:
            return None

        user.password_hash = password_hash
        user.updated_at = datetime.utcnow()
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user
