"""
File Endpoint - wiring of one consumed directory.

The endpoint owns the collaborators the CompletionHandler reads at
completion time: the idempotent flag, the idempotent repository and the
process strategy.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from file_completion.config import Settings
from file_completion.idempotent.file_repository import FileIdempotentRepository
from file_completion.idempotent.memory_repository import MemoryIdempotentRepository
from file_completion.idempotent.repository import IdempotentRepository
from file_completion.operations.file_operations import FileOperations, LocalFileOperations
from file_completion.strategies.base import ProcessStrategy
from file_completion.strategies.strategy_factory import ProcessStrategyFactory


class FileEndpoint:
    """A consumed directory together with its completion policy."""

    def __init__(
        self,
        directory: Union[str, Path],
        process_strategy: ProcessStrategy,
        idempotent: bool = False,
        idempotent_repository: Optional[IdempotentRepository] = None,
        operations: Optional[FileOperations] = None,
    ):
        self.directory = Path(directory)
        self.process_strategy = process_strategy
        self.operations = operations or process_strategy.operations
        self.idempotent = idempotent
        if idempotent and idempotent_repository is None:
            idempotent_repository = MemoryIdempotentRepository()
        self.idempotent_repository = idempotent_repository

    @classmethod
    def from_settings(
        cls, settings: Settings, operations: Optional[FileOperations] = None
    ) -> "FileEndpoint":
        operations = operations or LocalFileOperations()
        repository: Optional[IdempotentRepository] = None

        if settings.idempotent_enabled:
            if settings.idempotent_store_path:
                repository = FileIdempotentRepository(
                    settings.idempotent_store_path,
                    cache_size=settings.idempotent_cache_size,
                    max_file_store_size=settings.idempotent_max_file_store_size_kb * 1024,
                )
            else:
                repository = MemoryIdempotentRepository(settings.idempotent_cache_size)

        endpoint = cls(
            directory=settings.source_directory,
            process_strategy=ProcessStrategyFactory.create(settings, operations),
            idempotent=settings.idempotent_enabled,
            idempotent_repository=repository,
            operations=operations,
        )
        logging.info(f"Endpoint configured: {endpoint}")
        return endpoint

    def get_endpoint_info(self) -> Dict[str, Any]:
        return {
            "directory": str(self.directory),
            "idempotent": self.idempotent,
            "idempotent_repository": str(self.idempotent_repository),
            "process_strategy": str(self.process_strategy),
            "operations": str(self.operations),
        }

    def __str__(self) -> str:
        return (
            f"FileEndpoint(directory={self.directory}, "
            f"strategy={self.process_strategy}, idempotent={self.idempotent})"
        )
