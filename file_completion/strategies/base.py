"""Abstract process strategy - what commit and rollback do to a consumed file."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from file_completion.core.exceptions import GenericFileOperationFailedError
from file_completion.models import GenericFile, ProcessingOutcome
from file_completion.operations.file_operations import FileOperations, parent_directory
from file_completion.operations.path_utils import (
    build_destination_path,
    generate_conflict_free_path,
    resolve_target_directory,
)


class ProcessStrategy(ABC):
    """
    Policy for completing a processed file.

    Strategies carry no per-file state and may be called concurrently for
    different files. Both operations may raise; the caller decides what a
    failure means.
    """

    def __init__(self, operations: FileOperations, move_failed_directory: Optional[str] = None):
        self.operations = operations
        self.move_failed_directory = move_failed_directory or None

    @abstractmethod
    async def commit(self, file: GenericFile, outcome: ProcessingOutcome) -> None:
        """Make the consumption of the file durable."""
        pass

    async def rollback(self, file: GenericFile, outcome: ProcessingOutcome) -> None:
        """Leave the file recoverable, optionally moving it to the failed directory."""
        if self.move_failed_directory:
            await self._move_file(file, self.move_failed_directory)

    async def _move_file(self, file: GenericFile, directory: str) -> str:
        """
        Move a file into directory, keeping its relative sub-path.

        Returns:
            The path the file ended up at.

        Raises:
            GenericFileOperationFailedError: If the target directory cannot be
                created or the move fails.
        """
        target_directory = resolve_target_directory(directory, Path(file.endpoint_path))
        target = await generate_conflict_free_path(
            build_destination_path(file.relative_file_path, target_directory),
            self.operations.exists,
        )

        if not await self.operations.build_directory(parent_directory(str(target))):
            raise GenericFileOperationFailedError(
                f"Cannot create directory: {target.parent}", file.absolute_file_path
            )
        if not await self.operations.rename_file(file.absolute_file_path, str(target)):
            raise GenericFileOperationFailedError(
                f"Cannot rename file: {file} to: {target}", file.absolute_file_path
            )

        logging.debug(f"Moved {file.file_name} -> {target}")
        return str(target)

    def __str__(self) -> str:
        return self.__class__.__name__
