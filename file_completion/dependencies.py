from functools import lru_cache
from typing import Any, Dict

from file_completion.core.events.event_bus import DomainEventBus
from file_completion.endpoint import FileEndpoint
from file_completion.handling.completion_handler import CompletionHandler
from file_completion.handling.exception_reporter import EventBusExceptionReporter

from .config import Settings

# Global singleton instances
_singletons: Dict[str, Any] = {}


@lru_cache
def get_settings() -> Settings:
    """Settings singleton, read once from settings.env and the environment."""
    return Settings()


def get_event_bus() -> DomainEventBus:
    if "event_bus" not in _singletons:
        _singletons["event_bus"] = DomainEventBus()
    return _singletons["event_bus"]


def get_endpoint() -> FileEndpoint:
    if "endpoint" not in _singletons:
        _singletons["endpoint"] = FileEndpoint.from_settings(get_settings())
    return _singletons["endpoint"]


def get_completion_handler() -> CompletionHandler:
    """Completion handler reporting errors as CompletionErrorEvents on the event bus."""
    if "completion_handler" not in _singletons:
        _singletons["completion_handler"] = CompletionHandler(
            endpoint=get_endpoint(),
            exception_reporter=EventBusExceptionReporter(get_event_bus()),
        )
    return _singletons["completion_handler"]


def reset_singletons() -> None:
    """Reset all singletons - used by tests."""
    _singletons.clear()
    get_settings.cache_clear()
