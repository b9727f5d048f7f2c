"""
Check Reset Token Use Case

Tells whether a reset link is still usable.
"""

from datetime import timedelta

from src.app.services.reset_token_pair import ResetTokenPair
from src.app.services.token_store import ITokenStore
from .dtos import PasswordResetSettings


class CheckResetTokenUseCase:
    """Use case for checking that a reset token is issued and unexpired"""

    def __init__(self, token_store: ITokenStore, settings: PasswordResetSettings):
        self.tokens = ResetTokenPair(token_store, timedelta(minutes=settings.token_ttl_minutes))

    async def execute(self, token: str) -> bool:
        return await self.tokens.lookup_by_token(token) is not None
