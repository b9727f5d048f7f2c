"""
Redis token store

Shared TTL keystore for reset tokens and issuance cooldown marks.
"""

from datetime import datetime, timedelta
from typing import Optional

from redis.asyncio import Redis

from src.app.services.token_store import ITokenStore


class RedisTokenStore(ITokenStore):
    """
    Redis implementation of ITokenStore.

    Expiry is delegated to Redis key TTLs, so no cleanup job is needed.
    Redis errors propagate to the caller.
    """

    def __init__(
        self,
        redis_client: Redis,
        cooldown_seconds: int = 60,
        namespace: str = "password_reset",
    ):
        self._redis = redis_client
        self.cooldown_seconds = cooldown_seconds
        self.namespace = namespace

    def _cooldown_key(self, identity: str) -> str:
        return f"{self.namespace}:cooldown:{identity}"

    async def put(self, key: str, value: str, ttl: timedelta) -> None:
        await self._redis.set(key, value, ex=ttl)

    async def get(self, key: str) -> Optional[str]:
        value = await self._redis.get(key)
        if value is None:
            return None
        return value.decode("utf-8") if isinstance(value, bytes) else value

    async def delete(self, key: str) -> None:
        await self._redis.delete(key)

    async def take(self, key: str) -> bool:
        # DEL reports how many keys it removed; only one caller sees 1
        removed = await self._redis.delete(key)
        return removed == 1

    async def get_cooldown(self, identity: str) -> Optional[int]:
        # -2: no key, -1: key without expiry
        remaining = await self._redis.ttl(self._cooldown_key(identity))
        if remaining is None or remaining <= 0:
            return None
        return int(remaining)

    async def set_cooldown(self, identity: str) -> bool:
        until = datetime.utcnow() + timedelta(seconds=self.cooldown_seconds)
        created = await self._redis.set(
            self._cooldown_key(identity),
            until.isoformat(),
            ex=self.cooldown_seconds,
            nx=True,
        )
        return bool(created)
