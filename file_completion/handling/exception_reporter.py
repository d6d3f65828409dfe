"""
Exception reporters - where errors raised during completion end up.

A reporter must never raise: it is the last stop for errors that are not
allowed to propagate back into the processing pipeline.
"""

import logging
from abc import ABC, abstractmethod

from file_completion.core.events.completion_events import CompletionErrorEvent
from file_completion.core.events.event_bus import DomainEventBus


class ExceptionReporter(ABC):
    @abstractmethod
    async def report(self, error: BaseException) -> None:
        """Record the error. Must not raise."""
        pass


class LoggingExceptionReporter(ExceptionReporter):
    """Default reporter: logs the error with its traceback."""

    def __init__(self, name: str = "file_completion"):
        self.name = name
        self._logger = logging.getLogger(name)

    async def report(self, error: BaseException) -> None:
        self._logger.error(
            f"Caught exception: {error.__class__.__name__}: {error}",
            exc_info=(type(error), error, error.__traceback__),
        )

    def __str__(self) -> str:
        return f"LoggingExceptionReporter({self.name})"


class EventBusExceptionReporter(ExceptionReporter):
    """Publishes a CompletionErrorEvent per error, for dead-letter subscribers."""

    def __init__(self, event_bus: DomainEventBus):
        self.event_bus = event_bus

    async def report(self, error: BaseException) -> None:
        event = CompletionErrorEvent(
            error_class=error.__class__.__name__,
            error_message=str(error),
            exception=error,
        )
        try:
            await self.event_bus.publish(event)
        except Exception as e:
            logging.error(
                f"Could not publish {error.__class__.__name__} to event bus: {e}",
                exc_info=True,
            )
