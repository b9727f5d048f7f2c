"""
Password Complexity Validator

Applies an organization's complexity rules to a new password.
"""

import re
from typing import List, Optional

import bcrypt

from libs.result import Error, Result, Return
from src.domain.entities import PasswordPolicy, ResetErrorCode, User


def _violation(rule: str, message: str) -> Result[None]:
    return Return.err(Error(ResetErrorCode.PASSWORD_POLICY_VIOLATION, message, {"rule": rule}))


class PasswordComplexityValidator:
    """
    Organization password complexity check.

    Business Rules:
    - Only enforced when the organization policy has enable_password=True
    - Rules are checked in a fixed order; the first failure is reported
    - History reuse compares against bcrypt hashes of previous passwords
    """

    def validate(
        self,
        password: str,
        user: User,
        policy: Optional[PasswordPolicy],
        recent_hashes: Optional[List[str]] = None,
    ) -> Result[None]:
        if policy is None or not policy.enable_password:
            return Return.ok(None)

        if policy.min_length and len(password) < policy.min_length:
            return _violation(
                "min_length",
                f"Password must be at least {policy.min_length} characters long",
            )

        if policy.max_length and len(password) > policy.max_length:
            return _violation(
                "max_length",
                f"Password must be at most {policy.max_length} characters long",
            )

        digits = sum(1 for c in password if c.isdigit())
        if policy.digits_count and digits < policy.digits_count:
            return _violation(
                "digits_count",
                f"Password must contain at least {policy.digits_count} digits",
            )

        lowercase = sum(1 for c in password if c.islower())
        if policy.lowercase_count and lowercase < policy.lowercase_count:
            return _violation(
                "lowercase_count",
                f"Password must contain at least {policy.lowercase_count} lowercase letters",
            )

        uppercase = sum(1 for c in password if c.isupper())
        if policy.uppercase_count and uppercase < policy.uppercase_count:
            return _violation(
                "uppercase_count",
                f"Password must contain at least {policy.uppercase_count} uppercase letters",
            )

        special = sum(1 for c in password if not c.isalnum())
        if policy.special_char_count and special < policy.special_char_count:
            return _violation(
                "special_char_count",
                f"Password must contain at least {policy.special_char_count} special characters",
            )

        if policy.not_username and password.lower() == user.login_name.lower():
            return _violation("not_username", "Password must not be the same as the login name")

        if policy.regular_expression and not re.fullmatch(policy.regular_expression, password):
            return _violation("regular_expression", "Password does not match the required pattern")

        if policy.not_recent_count and recent_hashes:
            for password_hash in recent_hashes[: policy.not_recent_count]:
                if bcrypt.checkpw(password.encode(), password_hash.encode()):
                    return _violation(
                        "not_recent_count",
                        f"Password must differ from the last {policy.not_recent_count} passwords",
                    )

        return Return.ok(None)
