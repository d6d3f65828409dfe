import logging
from typing import Optional

from file_completion.models import GenericFile, ProcessingOutcome
from file_completion.operations.file_operations import FileOperations
from file_completion.strategies.base import ProcessStrategy


class RenameProcessStrategy(ProcessStrategy):
    """
    Moves the file into a done directory on commit.

    Relative directories resolve against the endpoint directory, so the
    default ".done" ends up next to the consumed files. A name already taken
    in the target directory gets a numeric suffix.
    """

    def __init__(
        self,
        operations: FileOperations,
        move_directory: str,
        move_failed_directory: Optional[str] = None,
    ):
        super().__init__(operations, move_failed_directory)
        if not move_directory:
            raise ValueError("move_directory must be set for RenameProcessStrategy")
        self.move_directory = move_directory

    async def commit(self, file: GenericFile, outcome: ProcessingOutcome) -> None:
        target = await self._move_file(file, self.move_directory)
        logging.info(f"Moved consumed file {file.file_name} to {target}")

    def __str__(self) -> str:
        return f"RenameProcessStrategy(move={self.move_directory})"
