"""
Process Strategy Factory.

Picks the commit/rollback policy for an endpoint from its settings:
- noop: leave files in place
- delete: delete files on commit
- otherwise: move files to the done directory
"""

import logging
from typing import Dict

from file_completion.config import Settings
from file_completion.operations.file_operations import FileOperations
from file_completion.strategies.base import ProcessStrategy
from file_completion.strategies.delete import DeleteProcessStrategy
from file_completion.strategies.noop import NoOpProcessStrategy
from file_completion.strategies.rename import RenameProcessStrategy

DEFAULT_MOVE_DIRECTORY = ".done"


class ProcessStrategyFactory:
    """Creates the ProcessStrategy configured for an endpoint."""

    @staticmethod
    def create(settings: Settings, operations: FileOperations) -> ProcessStrategy:
        move_failed = settings.move_failed_directory or None

        if settings.noop:
            strategy: ProcessStrategy = NoOpProcessStrategy(operations, move_failed)
        elif settings.delete:
            strategy = DeleteProcessStrategy(operations, move_failed)
        else:
            strategy = RenameProcessStrategy(
                operations,
                move_directory=settings.move_directory or DEFAULT_MOVE_DIRECTORY,
                move_failed_directory=move_failed,
            )

        logging.debug(f"Selected process strategy: {strategy}")
        return strategy

    @staticmethod
    def get_available_strategies() -> Dict[str, str]:
        return {
            "noop": "Leave files in place (idempotent tracking enabled by default)",
            "delete": "Delete files after successful processing",
            "rename": f"Move files to a done directory (default '{DEFAULT_MOVE_DIRECTORY}')",
        }
