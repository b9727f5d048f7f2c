from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Optional


class ITokenStore(ABC):
    """
    TTL-keyed key/value store shared by every service instance.

    Holds reset token entries and per-email issuance cooldown marks.
    Entries become unreadable once their TTL elapses.
    """

    @abstractmethod
    async def put(self, key: str, value: str, ttl: timedelta) -> None:
        """Store value under key for ttl"""
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get a live value, or None when absent or expired"""
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete key; no-op when absent"""
        pass

    @abstractmethod
    async def take(self, key: str) -> bool:
        """Delete key atomically; True only for the caller that removed a live entry"""
        pass

    @abstractmethod
    async def get_cooldown(self, identity: str) -> Optional[int]:
        """Remaining cooldown in whole seconds, or None when no mark is live"""
        pass

    @abstractmethod
    async def set_cooldown(self, identity: str) -> bool:
        """Set the cooldown mark if absent; False when a mark is already live"""
        pass
