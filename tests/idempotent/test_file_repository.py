"""
Tests for FileIdempotentRepository - keys persisted one per line.
"""

from unittest.mock import patch

import pytest

from file_completion.core.exceptions import IdempotentRepositoryError
from file_completion.idempotent.file_repository import FileIdempotentRepository


@pytest.fixture
def store(tmp_path):
    return tmp_path / "state" / "consumed.dat"


@pytest.mark.asyncio
async def test_add_appends_to_store(store):
    repository = FileIdempotentRepository(store)

    assert await repository.add("invoice-42.csv") is True
    assert await repository.add("invoice-43.csv") is True

    assert store.read_text(encoding="utf-8").splitlines() == [
        "invoice-42.csv",
        "invoice-43.csv",
    ]


@pytest.mark.asyncio
async def test_duplicate_add_does_not_append(store):
    repository = FileIdempotentRepository(store)

    await repository.add("a.txt")
    assert await repository.add("a.txt") is False

    assert store.read_text(encoding="utf-8").splitlines() == ["a.txt"]


@pytest.mark.asyncio
async def test_keys_survive_restart(store):
    await FileIdempotentRepository(store).add("a.txt")

    restarted = FileIdempotentRepository(store)

    assert await restarted.contains("a.txt")
    assert not await restarted.contains("b.txt")


@pytest.mark.asyncio
async def test_start_ignores_blank_lines(store):
    store.parent.mkdir(parents=True)
    store.write_text("a.txt\n\n  \nb.txt\n", encoding="utf-8")
    repository = FileIdempotentRepository(store)

    await repository.start()

    assert await repository.keys() == ["a.txt", "b.txt"]


@pytest.mark.asyncio
async def test_remove_rewrites_store(store):
    repository = FileIdempotentRepository(store)
    await repository.add("a.txt")
    await repository.add("b.txt")

    assert await repository.remove("a.txt") is True
    assert await repository.remove("missing") is False

    assert store.read_text(encoding="utf-8").splitlines() == ["b.txt"]


@pytest.mark.asyncio
async def test_clear_empties_store(store):
    repository = FileIdempotentRepository(store)
    await repository.add("a.txt")

    await repository.clear()

    assert store.read_text(encoding="utf-8") == ""
    assert not await repository.contains("a.txt")


@pytest.mark.asyncio
async def test_store_truncated_to_cache_when_too_large(store):
    repository = FileIdempotentRepository(store, cache_size=2, max_file_store_size=20)

    for key in ("first.txt", "second.txt", "third.txt"):
        await repository.add(key)

    assert store.read_text(encoding="utf-8").splitlines() == ["second.txt", "third.txt"]


@pytest.mark.asyncio
async def test_append_failure_raises_and_forgets_key(store):
    repository = FileIdempotentRepository(store)
    await repository.start()

    with patch.object(
        FileIdempotentRepository, "_append_to_store", side_effect=PermissionError("read-only")
    ):
        with pytest.raises(IdempotentRepositoryError, match="read-only"):
            await repository.add("a.txt")

    assert not await repository.contains("a.txt")


@pytest.mark.asyncio
async def test_truncation_failure_keeps_key_consistent(store, caplog):
    repository = FileIdempotentRepository(store, cache_size=1, max_file_store_size=1)
    await repository.start()

    with patch.object(
        FileIdempotentRepository,
        "_rewrite_store",
        side_effect=IdempotentRepositoryError("disk full"),
    ):
        assert await repository.add("a.txt") is True

    assert await repository.contains("a.txt")
    assert store.read_text(encoding="utf-8").splitlines() == ["a.txt"]
    assert "Could not truncate idempotent file store: disk full" in caplog.text


@pytest.mark.asyncio
async def test_unreadable_store_raises(tmp_path):
    directory_as_store = tmp_path / "store"
    directory_as_store.mkdir()

    with pytest.raises(IdempotentRepositoryError):
        await FileIdempotentRepository(directory_as_store).start()
