"""
Password Recovery Domain Enums

All enumeration types used across domain entities and use cases.
"""

from enum import Enum


class ResetErrorCode(str, Enum):
    """Machine-readable outcome codes of the password recovery workflow"""

    EMAIL_FORMAT_INVALID = "EMAIL_FORMAT_INVALID"
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND"
    FEDERATED_ACCOUNT_CANNOT_RESET = "FEDERATED_ACCOUNT_CANNOT_RESET"
    COOLDOWN_ACTIVE = "COOLDOWN_ACTIVE"
    INVALID_OR_EXPIRED_TOKEN = "INVALID_OR_EXPIRED_TOKEN"
    PASSWORD_POLICY_VIOLATION = "PASSWORD_POLICY_VIOLATION"
    NOTIFICATION_FAILED = "NOTIFICATION_FAILED"
    PERSISTENCE_FAILED = "PERSISTENCE_FAILED"


class NoticeTemplate(str, Enum):
    """Notification template codes sent to the notifier"""

    forgot_password = "forgot-password"
    password_changed = "password-changed"
