"""
Domain events emitted around file completion.
"""

from dataclasses import dataclass
from typing import Optional

from file_completion.core.events.domain_event import DomainEvent


@dataclass(frozen=True)
class CompletionErrorEvent(DomainEvent):
    """
    Published when an exception is reported during completion.

    Subscribers act as a dead-letter sink for errors that never propagate
    back to the processing pipeline.
    """

    error_class: str
    error_message: str
    exception: Optional[BaseException] = None
