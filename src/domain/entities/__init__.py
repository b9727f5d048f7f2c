"""
Password Recovery Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import ResetErrorCode, NoticeTemplate

# Export all entities
from .user import User
from .password_policy import PasswordPolicy
from .system_setting import SystemSetting
from .password_history import PasswordHistory

__all__ = [
    # Enums
    "ResetErrorCode",
    "NoticeTemplate",
    # Entities
    "User",
    "PasswordPolicy",
    "SystemSetting",
    "PasswordHistory",
]
