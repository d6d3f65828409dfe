"""
Completion handling - commit/rollback decision and exception reporting.
"""

from .exception_reporter import (
    ExceptionReporter,
    LoggingExceptionReporter,
    EventBusExceptionReporter,
)
from .completion_handler import CompletionHandler

__all__ = [
    "CompletionHandler",
    "ExceptionReporter",
    "LoggingExceptionReporter",
    "EventBusExceptionReporter",
]
