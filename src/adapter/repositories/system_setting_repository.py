from typing import Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.system_setting_repository import ISystemSettingRepository
from src.domain.entities import SystemSetting


class SystemSettingRepository(ISystemSettingRepository):
    """SystemSetting repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self) -> Optional[SystemSetting]:
        """Get the system-wide settings row, if configured"""
        stmt = select(SystemSetting).order_by(SystemSetting.id).limit(1)
        result = await self.session.exec(stmt)
        return result.first()
