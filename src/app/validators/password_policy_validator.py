"""
Password Policy Validator

Checks a candidate password against the effective length policy.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.password_policy_repository import IPasswordPolicyRepository
from src.app.repositories.system_setting_repository import ISystemSettingRepository
from src.domain.entities import ResetErrorCode


class PasswordPolicyValidator:
    """
    Resolves and applies the effective password length rule for a user.

    Business Rules (precedence ordered, only one tier applies):
    - Organization policy with enable_password=True: pass, the organization
      governs its own rules
    - Otherwise the system setting's min/max length, spaces ignored
    - No system setting, or a missing bound: pass
    """

    def __init__(
        self,
        password_policies: IPasswordPolicyRepository,
        system_settings: ISystemSettingRepository,
    ):
        self.password_policies = password_policies
        self.system_settings = system_settings

    async def validate(
        self,
        password: str,
        organization_id: Optional[UUID],
        fail_on_violation: bool = True,
    ) -> Result[bool]:
        """
        Validate password length against the effective policy.

        Args:
            password: Candidate password
            organization_id: Organization of the user, if any
            fail_on_violation: Return an Error instead of ok(False) on violation

        Returns:
            Result with True if compliant, False if not (when not failing),
            or PASSWORD_POLICY_VIOLATION Error carrying min and max
        """
        if organization_id is not None:
            policy = await self.password_policies.get_by_organization_id(organization_id)
            if policy is not None and policy.enable_password:
                return Return.ok(True)

        setting = await self.system_settings.get()
        if (
            setting is None
            or setting.min_password_length is None
            or setting.max_password_length is None
        ):
            return Return.ok(True)

        min_length = setting.min_password_length
        max_length = setting.max_password_length
        length = len(password.replace(" ", ""))

        if min_length <= length <= max_length:
            return Return.ok(True)

        if not fail_on_violation:
            return Return.ok(False)

        return Return.err(
            Error(
                ResetErrorCode.PASSWORD_POLICY_VIOLATION,
                f"Password length must be between {min_length} and {max_length} characters",
                {"min": min_length, "max": max_length},
            )
        )
