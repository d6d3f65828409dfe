"""
Tests for MemoryIdempotentRepository.
"""

import asyncio

import pytest

from file_completion.idempotent.memory_repository import MemoryIdempotentRepository


@pytest.mark.asyncio
async def test_add_and_contains():
    repository = MemoryIdempotentRepository()

    assert await repository.add("invoice-42.csv") is True
    assert await repository.contains("invoice-42.csv")
    assert not await repository.contains("invoice-43.csv")


@pytest.mark.asyncio
async def test_add_is_idempotent():
    repository = MemoryIdempotentRepository()

    await repository.add("a.txt")
    assert await repository.add("a.txt") is False
    assert await repository.count() == 1


@pytest.mark.asyncio
async def test_remove_and_clear():
    repository = MemoryIdempotentRepository()
    await repository.add("a.txt")
    await repository.add("b.txt")

    assert await repository.remove("a.txt") is True
    assert await repository.remove("a.txt") is False
    assert await repository.keys() == ["b.txt"]

    await repository.clear()
    assert await repository.count() == 0


@pytest.mark.asyncio
async def test_least_recently_used_key_is_evicted():
    repository = MemoryIdempotentRepository(cache_size=2)
    await repository.add("a.txt")
    await repository.add("b.txt")

    # Touch a.txt so b.txt becomes the oldest
    assert await repository.contains("a.txt")
    await repository.add("c.txt")

    assert await repository.keys() == ["a.txt", "c.txt"]


@pytest.mark.asyncio
async def test_concurrent_adds():
    repository = MemoryIdempotentRepository()

    results = await asyncio.gather(*(repository.add(f"file-{i % 10}") for i in range(50)))

    assert results.count(True) == 10
    assert await repository.count() == 10


def test_cache_size_must_be_positive():
    with pytest.raises(ValueError):
        MemoryIdempotentRepository(cache_size=0)
