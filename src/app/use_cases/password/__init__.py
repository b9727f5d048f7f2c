"""
Password Recovery Use Cases

Forgot-password workflow: account check, cooldown, token issuance,
token check and password reset.
"""

from .check_user_by_email_use_case import CheckUserByEmailUseCase
from .check_cooldown_use_case import CheckCooldownUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .check_reset_token_use_case import CheckResetTokenUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .dtos import PasswordResetSettings, ResetResult, UserProjection

__all__ = [
    # Use Cases
    "CheckUserByEmailUseCase",
    "CheckCooldownUseCase",
    "RequestPasswordResetUseCase",
    "CheckResetTokenUseCase",
    "ConfirmPasswordResetUseCase",
    # DTOs
    "PasswordResetSettings",
    "ResetResult",
    "UserProjection",
]
