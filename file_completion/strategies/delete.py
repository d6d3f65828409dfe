import logging

from file_completion.core.exceptions import GenericFileOperationFailedError
from file_completion.models import GenericFile, ProcessingOutcome
from file_completion.strategies.base import ProcessStrategy


class DeleteProcessStrategy(ProcessStrategy):
    """Deletes the file once it has been processed."""

    async def commit(self, file: GenericFile, outcome: ProcessingOutcome) -> None:
        deleted = await self.operations.delete_file(file.absolute_file_path)
        if not deleted:
            raise GenericFileOperationFailedError(
                f"Cannot delete file: {file}", file.absolute_file_path
            )
        logging.info(f"Deleted consumed file: {file.file_name}")
