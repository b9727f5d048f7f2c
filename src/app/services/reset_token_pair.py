"""
Reset Token Pair

Keeps the two store entries of a recovery attempt consistent:
- email index -> token key
- token key   -> email
"""

import hashlib
import secrets
from datetime import timedelta
from typing import Optional

from src.app.services.token_store import ITokenStore


class ResetTokenPair:
    """
    Issues, resolves and invalidates password reset tokens.

    Business Rules:
    - Token is 32 random bytes, URL-safe, with path separators removed
    - Only the SHA-256 of the token is used as a store key
    - At most one live token per email: issuing revokes the previous one
      before the new one becomes readable
    - The email index is keyed by the address exactly as the directory
      stores it, matching the cooldown mark and the user lookup
    """

    def __init__(self, store: ITokenStore, ttl: timedelta, namespace: str = "password_reset"):
        self.store = store
        self.ttl = ttl
        self.namespace = namespace

    def email_key(self, email: str) -> str:
        digest = hashlib.sha256(email.encode()).hexdigest()
        return f"{self.namespace}:email:{digest}"

    def token_key(self, token: str) -> str:
        digest = hashlib.sha256(token.encode()).hexdigest()
        return f"{self.namespace}:token:{digest}"

    @staticmethod
    def generate_token() -> str:
        return secrets.token_urlsafe(32).replace("/", "")

    async def issue(self, email: str) -> str:
        """Revoke any live token for email and store a fresh one"""
        await self.revoke_for_email(email)

        token = self.generate_token()
        token_key = self.token_key(token)
        await self.store.put(self.email_key(email), token_key, self.ttl)
        await self.store.put(token_key, email, self.ttl)
        return token

    async def revoke_for_email(self, email: str) -> None:
        previous_token_key = await self.store.get(self.email_key(email))
        if previous_token_key is not None:
            await self.store.delete(previous_token_key)

    async def lookup_by_token(self, token: str) -> Optional[str]:
        """Email the token was issued for, or None when unknown or expired"""
        return await self.store.get(self.token_key(token))

    async def invalidate(self, token: str) -> bool:
        """Consume the token; False when it was already consumed or expired"""
        return await self.store.take(self.token_key(token))
