"""
Completion Handler - decides what happens to a file after it was processed.

Each processed file is completed exactly once: either it is committed
(registered as consumed and handed to the process strategy's commit) or it
is rolled back. Nothing raised while doing so is allowed to escape; every
error ends up at the exception reporter.
"""

import logging
from typing import Optional

from file_completion.core.completion_state import CompletionTracker
from file_completion.core.exceptions import IdempotentRepositoryError
from file_completion.endpoint import FileEndpoint
from file_completion.handling.exception_reporter import (
    ExceptionReporter,
    LoggingExceptionReporter,
)
from file_completion.models import CompletionState, GenericFile, ProcessingOutcome
from file_completion.strategies.base import ProcessStrategy


class CompletionHandler:
    """
    Commits or rolls back a processed file.

    The pipeline reports outcomes through on_success and on_failure; both end
    in the same decision because outcome.failed carries the real status. A
    failure already handled upstream arrives through on_success as a
    non-failed outcome and is committed.
    """

    def __init__(
        self,
        endpoint: FileEndpoint,
        exception_reporter: Optional[ExceptionReporter] = None,
    ):
        self.endpoint = endpoint
        self._exception_reporter = exception_reporter

    @property
    def exception_reporter(self) -> ExceptionReporter:
        if self._exception_reporter is None:
            self._exception_reporter = LoggingExceptionReporter(self.__class__.__name__)
        return self._exception_reporter

    @exception_reporter.setter
    def exception_reporter(self, exception_reporter: ExceptionReporter) -> None:
        self._exception_reporter = exception_reporter

    async def on_success(self, outcome: ProcessingOutcome) -> None:
        await self.complete(outcome)

    async def on_failure(self, outcome: ProcessingOutcome) -> None:
        await self.complete(outcome)

    async def complete(self, outcome: ProcessingOutcome) -> None:
        """Drive the outcome to exactly one of commit or rollback. Never raises."""
        process_strategy = self.endpoint.process_strategy
        file = outcome.resource
        tracker = CompletionTracker(file.file_name)

        logging.debug(f"Done processing file: {file} with outcome: {outcome}")

        committed = False
        try:
            if not outcome.failed:
                tracker.transition(CompletionState.COMMIT_ATTEMPTED)
                committed = await self._process_strategy_commit(
                    process_strategy, outcome, file
                )
            elif outcome.error is not None:
                await self._handle_exception(outcome.error)
        finally:
            if committed:
                tracker.transition(CompletionState.COMMITTED)
            else:
                tracker.transition(CompletionState.ROLLBACK_ATTEMPTED)
                await self._process_strategy_rollback(process_strategy, outcome, file)

        logging.debug(f"Completion finished: {tracker}")

    async def _process_strategy_commit(
        self,
        process_strategy: ProcessStrategy,
        outcome: ProcessingOutcome,
        file: GenericFile,
    ) -> bool:
        """
        Register the file as consumed and commit it.

        The key is added before the strategy runs: consumption is logical, so a
        file counts as consumed even if archiving it fails afterwards. A failed
        registration does not stop the strategy commit from being attempted.

        Returns:
            True only if both steps completed without raising.
        """
        registered = True
        if self.endpoint.idempotent:
            registered = await self._register_consumed(file)

        try:
            logging.debug(f"Committing process strategy: {process_strategy} for file: {file}")
            await process_strategy.commit(file, outcome)
        except Exception as e:
            logging.debug(f"Commit failed for {file.file_name}: {e}")
            await self._handle_exception(e)
            return False

        return registered

    async def _register_consumed(self, file: GenericFile) -> bool:
        repository = self.endpoint.idempotent_repository
        try:
            if repository is None:
                raise IdempotentRepositoryError(
                    f"Idempotent tracking is enabled but no repository is configured "
                    f"for {self.endpoint.directory}"
                )
            # Key is the file name, not its location: commit may move the file
            await repository.add(file.resource_key)
        except Exception as e:
            logging.debug(f"Could not register {file.resource_key} as consumed: {e}")
            await self._handle_exception(e)
            return False
        return True

    async def _process_strategy_rollback(
        self,
        process_strategy: ProcessStrategy,
        outcome: ProcessingOutcome,
        file: GenericFile,
    ) -> None:
        logging.warning(f"Rolling back process strategy: {process_strategy} for file: {file}")
        try:
            await process_strategy.rollback(file, outcome)
        except Exception as e:
            await self._handle_exception(e)

    async def _handle_exception(self, error: Optional[BaseException]) -> None:
        if error is None:
            error = ValueError("Handling [None] exception")
        try:
            await self.exception_reporter.report(error)
        except Exception as e:
            logging.error(
                f"Exception reporter {self.exception_reporter} failed while reporting "
                f"{error.__class__.__name__}: {e}",
                exc_info=True,
            )

    def __str__(self) -> str:
        return "CompletionHandler"
