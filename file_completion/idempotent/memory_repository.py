"""
Memory Idempotent Repository - LRU-bounded in-memory key store.
"""

import asyncio
import logging
from collections import OrderedDict
from typing import List

from file_completion.idempotent.repository import IdempotentRepository

DEFAULT_CACHE_SIZE = 1000


class MemoryIdempotentRepository(IdempotentRepository):
    """
    Keeps the most recently consumed keys in memory.

    When more than cache_size keys are stored the least recently used key is
    evicted, after which that file would be consumed again.
    """

    def __init__(self, cache_size: int = DEFAULT_CACHE_SIZE):
        if cache_size <= 0:
            raise ValueError(f"cache_size must be positive, got {cache_size}")
        self.cache_size = cache_size
        self._cache: "OrderedDict[str, None]" = OrderedDict()
        self._lock = asyncio.Lock()
        logging.debug(f"MemoryIdempotentRepository initialized (cache_size={cache_size})")

    async def add(self, key: str) -> bool:
        async with self._lock:
            return self._add_to_cache(key)

    async def contains(self, key: str) -> bool:
        async with self._lock:
            if key not in self._cache:
                return False
            self._cache.move_to_end(key)
            return True

    async def remove(self, key: str) -> bool:
        async with self._lock:
            return self._remove_from_cache(key)

    async def clear(self) -> None:
        async with self._lock:
            self._cache.clear()

    async def keys(self) -> List[str]:
        """Snapshot of stored keys, least recently used first."""
        async with self._lock:
            return list(self._cache.keys())

    async def count(self) -> int:
        async with self._lock:
            return len(self._cache)

    def _add_to_cache(self, key: str) -> bool:
        # Caller holds the lock
        if key in self._cache:
            self._cache.move_to_end(key)
            return False
        self._cache[key] = None
        while len(self._cache) > self.cache_size:
            evicted, _ = self._cache.popitem(last=False)
            logging.debug(f"Evicted idempotent key: {evicted}")
        return True

    def _remove_from_cache(self, key: str) -> bool:
        if key not in self._cache:
            return False
        del self._cache[key]
        return True

    def __str__(self) -> str:
        return f"MemoryIdempotentRepository(cache_size={self.cache_size})"
