"""
Password Validators

Policy checks that gate a password change.
"""

from .password_policy_validator import PasswordPolicyValidator
from .password_complexity_validator import PasswordComplexityValidator

__all__ = [
    "PasswordPolicyValidator",
    "PasswordComplexityValidator",
]
