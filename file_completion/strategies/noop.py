import logging

from file_completion.models import GenericFile, ProcessingOutcome
from file_completion.strategies.base import ProcessStrategy


class NoOpProcessStrategy(ProcessStrategy):
    """Leaves consumed files where they are; pair with idempotent tracking."""

    async def commit(self, file: GenericFile, outcome: ProcessingOutcome) -> None:
        logging.debug(f"No-op commit for {file.file_name}")
