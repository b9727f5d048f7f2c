from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import SystemSetting


class ISystemSettingRepository(ABC):
    """SystemSetting repository interface - application layer"""

    @abstractmethod
    async def get(self) -> Optional[SystemSetting]:
        """Get the system-wide settings row, if configured"""
        pass
