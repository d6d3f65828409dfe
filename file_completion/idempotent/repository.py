"""Abstract idempotent repository - the set of file keys already consumed."""

from abc import ABC, abstractmethod


class IdempotentRepository(ABC):
    """
    Set-like store of keys for files that have been consumed.

    Shared by every completion of an endpoint, so implementations must be
    safe to call from concurrent tasks.
    """

    @abstractmethod
    async def add(self, key: str) -> bool:
        """Add a key. Returns False if it was already present."""
        pass

    @abstractmethod
    async def contains(self, key: str) -> bool:
        pass

    @abstractmethod
    async def remove(self, key: str) -> bool:
        """Remove a key. Returns False if it was not present."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        pass
