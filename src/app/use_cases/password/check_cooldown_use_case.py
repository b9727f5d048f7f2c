"""
Check Cooldown Use Case

Reports whether a reset email was sent to an address too recently.
"""

from libs.result import Error
from src.app.services.token_store import ITokenStore
from src.domain.entities import ResetErrorCode
from .dtos import ResetResult


def cooldown_active(remaining: int) -> ResetResult:
    return ResetResult.fail(
        Error(
            ResetErrorCode.COOLDOWN_ACTIVE,
            f"A reset email was sent recently, retry in {remaining} seconds",
        ),
        cooldown_remaining=remaining,
    )


class CheckCooldownUseCase:
    """Use case for reading the per-email issuance cooldown"""

    def __init__(self, token_store: ITokenStore):
        self.token_store = token_store

    async def execute(self, email: str) -> ResetResult:
        remaining = await self.token_store.get_cooldown(email)
        if remaining is not None:
            return cooldown_active(remaining)
        return ResetResult.ok()
