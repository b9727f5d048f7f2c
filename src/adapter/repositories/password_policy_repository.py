from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.password_policy_repository import IPasswordPolicyRepository
from src.domain.entities import PasswordPolicy


class PasswordPolicyRepository(IPasswordPolicyRepository):
    """PasswordPolicy repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_organization_id(self, organization_id: UUID) -> Optional[PasswordPolicy]:
        """Get the password policy of an organization"""
        stmt = select(PasswordPolicy).where(PasswordPolicy.organization_id == organization_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()
