"""
Use Cases

Use cases are organized into domain folders:
- password/: Forgot-password recovery flow

Import from subdirectories for better organization.
"""

from .password import (
    CheckUserByEmailUseCase,
    CheckCooldownUseCase,
    RequestPasswordResetUseCase,
    CheckResetTokenUseCase,
    ConfirmPasswordResetUseCase,
)

__all__ = [
    # Password recovery
    "CheckUserByEmailUseCase",
    "CheckCooldownUseCase",
    "RequestPasswordResetUseCase",
    "CheckResetTokenUseCase",
    "ConfirmPasswordResetUseCase",
]
