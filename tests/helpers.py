"""Shared builders for completion tests."""

from pathlib import Path
from unittest.mock import AsyncMock

from file_completion.endpoint import FileEndpoint
from file_completion.idempotent.memory_repository import MemoryIdempotentRepository
from file_completion.models import GenericFile
from file_completion.operations.file_operations import FileOperations
from file_completion.strategies.base import ProcessStrategy


def virtual_file(name: str, endpoint: str = "/inbox") -> GenericFile:
    """GenericFile for a path that does not exist on disk."""
    return GenericFile.from_path(Path(endpoint) / name, Path(endpoint))


def mock_endpoint(idempotent: bool = True, repository=None) -> FileEndpoint:
    """Endpoint with a mocked strategy and an in-memory repository."""
    strategy = AsyncMock(spec=ProcessStrategy)
    if repository is None and idempotent:
        repository = MemoryIdempotentRepository()
    return FileEndpoint(
        directory="/inbox",
        process_strategy=strategy,
        idempotent=idempotent,
        idempotent_repository=repository,
        operations=AsyncMock(spec=FileOperations),
    )
