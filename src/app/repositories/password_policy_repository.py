from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import PasswordPolicy


class IPasswordPolicyRepository(ABC):
    """PasswordPolicy repository interface - application layer"""

    @abstractmethod
    async def get_by_organization_id(self, organization_id: UUID) -> Optional[PasswordPolicy]:
        """Get the password policy of an organization"""
        pass
