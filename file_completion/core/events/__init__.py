from .domain_event import DomainEvent
from .completion_events import CompletionErrorEvent
from .event_bus import DomainEventBus, EventHandler

__all__ = ["DomainEvent", "CompletionErrorEvent", "DomainEventBus", "EventHandler"]
