"""
File Idempotent Repository - LRU cache backed by a plain text file store.

The store holds one key per line. Keys are appended as they are added; once
the file grows past max_file_store_size it is rewritten from the cache, which
drops keys that have already been evicted.
"""

import logging
from pathlib import Path
from typing import Union

import aiofiles
import aiofiles.os

from file_completion.core.exceptions import IdempotentRepositoryError
from file_completion.idempotent.memory_repository import (
    DEFAULT_CACHE_SIZE,
    MemoryIdempotentRepository,
)

DEFAULT_MAX_FILE_STORE_SIZE = 1024 * 1024


class FileIdempotentRepository(MemoryIdempotentRepository):
    """Idempotent repository that survives restarts."""

    def __init__(
        self,
        file_store: Union[str, Path],
        cache_size: int = DEFAULT_CACHE_SIZE,
        max_file_store_size: int = DEFAULT_MAX_FILE_STORE_SIZE,
    ):
        super().__init__(cache_size=cache_size)
        self.file_store = Path(file_store)
        self.max_file_store_size = max_file_store_size
        self._started = False

    async def start(self) -> None:
        """Load keys from the file store. Safe to call more than once."""
        async with self._lock:
            if self._started:
                return
            await self._load_store()
            self._started = True

    async def add(self, key: str) -> bool:
        await self.start()
        async with self._lock:
            if not self._add_to_cache(key):
                return False
            try:
                await self._append_to_store(key)
            except OSError as e:
                self._remove_from_cache(key)
                raise IdempotentRepositoryError(
                    f"Error appending key '{key}' to file store {self.file_store}: {e}"
                ) from e

            if await self._store_size() > self.max_file_store_size:
                logging.warning(
                    f"Idempotent file store {self.file_store} exceeds "
                    f"{self.max_file_store_size} bytes, truncating"
                )
                try:
                    await self._rewrite_store()
                except IdempotentRepositoryError as e:
                    # Key is already appended; an oversized store is still valid
                    logging.warning(f"Could not truncate idempotent file store: {e}")
            return True

    async def contains(self, key: str) -> bool:
        await self.start()
        return await super().contains(key)

    async def remove(self, key: str) -> bool:
        await self.start()
        async with self._lock:
            if not self._remove_from_cache(key):
                return False
            await self._rewrite_store()
            return True

    async def clear(self) -> None:
        await self.start()
        async with self._lock:
            self._cache.clear()
            await self._rewrite_store()

    async def _load_store(self) -> None:
        # Caller holds the lock
        try:
            await aiofiles.os.makedirs(self.file_store.parent, exist_ok=True)
            if not await aiofiles.os.path.exists(self.file_store):
                logging.info(f"Idempotent file store {self.file_store} does not exist yet")
                return
            async with aiofiles.open(self.file_store, "r", encoding="utf-8") as f:
                async for line in f:
                    key = line.strip()
                    if key:
                        self._add_to_cache(key)
        except OSError as e:
            raise IdempotentRepositoryError(
                f"Error loading idempotent file store {self.file_store}: {e}"
            ) from e
        logging.info(
            f"Loaded {len(self._cache)} keys from idempotent file store {self.file_store}"
        )

    async def _append_to_store(self, key: str) -> None:
        async with aiofiles.open(self.file_store, "a", encoding="utf-8") as f:
            await f.write(key + "\n")

    async def _rewrite_store(self) -> None:
        """Rewrite the file store from the cache contents."""
        try:
            async with aiofiles.open(self.file_store, "w", encoding="utf-8") as f:
                for key in self._cache:
                    await f.write(key + "\n")
        except OSError as e:
            raise IdempotentRepositoryError(
                f"Error rewriting idempotent file store {self.file_store}: {e}"
            ) from e

    async def _store_size(self) -> int:
        try:
            return (await aiofiles.os.stat(self.file_store)).st_size
        except FileNotFoundError:
            return 0

    def __str__(self) -> str:
        return f"FileIdempotentRepository({self.file_store})"
