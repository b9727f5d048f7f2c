"""
Confirm Password Reset Use Case

Exchanges a reset token for a new password.
"""

import logging
from datetime import timedelta

import bcrypt

from libs.result import Error
from src.app.services.notifier import INotifier, NoticeTarget
from src.app.services.reset_token_pair import ResetTokenPair
from src.app.services.token_store import ITokenStore
from src.app.services.unit_of_work import UnitOfWork
from src.app.validators import PasswordComplexityValidator, PasswordPolicyValidator
from src.domain.entities import NoticeTemplate, PasswordHistory, ResetErrorCode
from .dtos import PasswordResetSettings, ResetResult, UserProjection

logger = logging.getLogger(__name__)

INVALID_TOKEN_MESSAGE = "Invalid or expired password reset token"


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming a password reset.

    Business Rules:
    - Token must resolve to an email, and the email to a user
    - Organization complexity rules run first, then the length policy;
      either can reject the password
    - Password is hashed with bcrypt (cost factor 12)
    - Credential update and password history are committed together
    - Token is consumed atomically just before commit (single use);
      losing the claim rolls the writes back
    - Password-changed notice is best effort
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_store: ITokenStore,
        notifier: INotifier,
        settings: PasswordResetSettings,
    ):
        self.uow = uow
        self.notifier = notifier
        self.tokens = ResetTokenPair(token_store, timedelta(minutes=settings.token_ttl_minutes))
        self.complexity_validator = PasswordComplexityValidator()

    async def execute(self, token: str, new_password: str) -> ResetResult:
        """
        Execute confirm password reset use case.

        Args:
            token: Password reset token from the reset link
            new_password: New password to set

        Returns:
            ResetResult with the updated user projection, or
            INVALID_OR_EXPIRED_TOKEN, PASSWORD_POLICY_VIOLATION, PERSISTENCE_FAILED
        """
        email = await self.tokens.lookup_by_token(token)
        if email is None:
            return ResetResult.fail(
                Error(ResetErrorCode.INVALID_OR_EXPIRED_TOKEN, INVALID_TOKEN_MESSAGE)
            )

        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return ResetResult.fail(
                    Error(ResetErrorCode.INVALID_OR_EXPIRED_TOKEN, INVALID_TOKEN_MESSAGE)
                )

            policy = None
            recent_hashes = []
            if user.organization_id is not None:
                policy = await self.uow.password_policies.get_by_organization_id(
                    user.organization_id
                )
            if policy is not None and policy.not_recent_count:
                history = await self.uow.password_histories.get_recent_by_user_id(
                    user.id, policy.not_recent_count
                )
                recent_hashes = [entry.password_hash for entry in history]

            complexity = self.complexity_validator.validate(
                new_password, user, policy, recent_hashes
            )
            if complexity.is_err():
                logger.info(f"Password rejected for user {user.id}: {complexity.error.message}")
                return ResetResult.fail(complexity.error)

            length_validator = PasswordPolicyValidator(
                self.uow.password_policies, self.uow.system_settings
            )
            length = await length_validator.validate(
                new_password, user.organization_id, fail_on_violation=True
            )
            if length.is_err():
                logger.info(f"Password rejected for user {user.id}: {length.error.message}")
                return ResetResult.fail(length.error)

            password_hash = bcrypt.hashpw(new_password.encode(), bcrypt.gensalt(12)).decode()

            updated_user = await self.uow.users.update_credentials(user.id, password_hash)
            if updated_user is None:
                return ResetResult.fail(
                    Error(ResetErrorCode.PERSISTENCE_FAILED, "Password could not be updated")
                )

            await self.uow.password_histories.create(
                PasswordHistory(user_id=updated_user.id, password_hash=password_hash)
            )

            # Claim the token last; a concurrent redemption that got here first wins
            if not await self.tokens.invalidate(token):
                return ResetResult.fail(
                    Error(ResetErrorCode.INVALID_OR_EXPIRED_TOKEN, INVALID_TOKEN_MESSAGE)
                )

            await self.uow.commit()

            # Read before leaving the unit of work, its exit expires loaded rows
            projection = UserProjection.from_user(updated_user)
            user_name = updated_user.real_name or updated_user.login_name

        notified = await self.notifier.send(
            NoticeTemplate.password_changed,
            [NoticeTarget(id=projection.id)],
            {"userName": user_name},
        )
        if notified.is_err():
            logger.warning(
                f"Password-changed notice to user {projection.id} was not sent: "
                f"{notified.error.code}"
            )

        return ResetResult.ok(projection)
