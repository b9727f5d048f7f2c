"""
SystemSetting Entity

System-wide fallback password length bounds.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class SystemSetting(SQLModel, table=True):
    """
    SystemSetting entity - single row of system-wide settings.

    Business Rules:
    - Applied only when the user's organization has no enabled policy
    - Length check is skipped when either bound is unset
    """

    __tablename__ = "system_settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    min_password_length: Optional[int] = None
    max_password_length: Optional[int] = None
