"""
Request Password Reset Use Case

Issues a reset token and sends the reset link by email.
"""

import logging
from datetime import timedelta

from libs.result import Error
from src.app.services.notifier import INotifier, NoticeTarget
from src.app.services.reset_token_pair import ResetTokenPair
from src.app.services.token_store import ITokenStore
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import NoticeTemplate, ResetErrorCode
from .check_cooldown_use_case import CheckCooldownUseCase, cooldown_active
from .check_user_by_email_use_case import CheckUserByEmailUseCase
from .dtos import PasswordResetSettings, ResetResult

logger = logging.getLogger(__name__)


class RequestPasswordResetUseCase:
    """
    Use case for requesting a password reset link.

    Business Rules:
    - Account must exist and not be federated
    - One request per email per cooldown window; the cooldown mark is
      claimed atomically so concurrent requests cannot both issue
    - A new token revokes the previously issued one immediately
    - Token expires after the configured window (default 10 minutes)
    - Notifier failure fails the request, but the token stays valid and the
      cooldown stays set
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_store: ITokenStore,
        notifier: INotifier,
        settings: PasswordResetSettings,
    ):
        self.uow = uow
        self.token_store = token_store
        self.notifier = notifier
        self.settings = settings
        self.tokens = ResetTokenPair(token_store, timedelta(minutes=settings.token_ttl_minutes))

    async def execute(self, email: str) -> ResetResult:
        """
        Execute request password reset use case.

        Args:
            email: Address the reset link is sent to

        Returns:
            ResetResult with the user projection, or the failing step's code
        """
        user_check = await CheckUserByEmailUseCase(self.uow).execute(email)
        if not user_check.success:
            return user_check

        user = user_check.user

        cooldown_check = await CheckCooldownUseCase(self.token_store).execute(user.email)
        if not cooldown_check.success:
            return cooldown_check

        if not await self.token_store.set_cooldown(user.email):
            # Another request claimed the window since the check above
            remaining = await self.token_store.get_cooldown(user.email)
            return cooldown_active(remaining or 1)

        token = await self.tokens.issue(user.email)
        redirect_url = self.settings.reset_url(token)

        sent = await self.notifier.send(
            NoticeTemplate.forgot_password,
            [NoticeTarget(email=user.email)],
            {"userName": user.login_name, "redirectUrl": redirect_url},
        )
        if sent.is_err():
            logger.warning(
                f"Reset email to user {user.id} was not sent: {sent.error.code} {sent.error.message}"
            )
            return ResetResult.fail(
                Error(ResetErrorCode.NOTIFICATION_FAILED, "Reset email could not be sent"),
                user=user,
            )

        return ResetResult.ok(user)
