"""
File Completion - commit or roll back files after they have been processed.
"""

from file_completion.endpoint import FileEndpoint
from file_completion.handling.completion_handler import CompletionHandler
from file_completion.handling.exception_reporter import (
    EventBusExceptionReporter,
    ExceptionReporter,
    LoggingExceptionReporter,
)
from file_completion.models import CompletionState, GenericFile, ProcessingOutcome

__all__ = [
    "CompletionHandler",
    "CompletionState",
    "EventBusExceptionReporter",
    "ExceptionReporter",
    "FileEndpoint",
    "GenericFile",
    "LoggingExceptionReporter",
    "ProcessingOutcome",
]
