"""
Event bus used to fan completion events out to subscribers.
"""
import asyncio
import logging
from collections import defaultdict
from typing import Awaitable, Callable, Dict, List, Type

from file_completion.core.events.domain_event import DomainEvent

# An event handler is an async function that takes a DomainEvent and returns None
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class DomainEventBus:
    """
    Asynchronous event bus.

    A failing handler never prevents the other handlers from running and
    never propagates to the publisher; its exception is logged instead.
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[EventHandler]] = defaultdict(list)
        self._lock = asyncio.Lock()

    async def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """
        Subscribe a handler to an event type.

        Args:
            event_type: Exact event class to receive; subclasses are not delivered.
            handler: Coroutine function called with each published event.
        """
        async with self._lock:
            self._handlers[event_type].append(handler)
            logging.debug(f"Handler {handler.__name__} subscribed to {event_type.__name__}")

    async def unsubscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> bool:
        """
        Remove a handler.

        Returns:
            False if the handler was not subscribed to event_type.
        """
        async with self._lock:
            handlers = self._handlers.get(event_type, [])
            if handler not in handlers:
                return False
            handlers.remove(handler)
            return True

    def handler_count(self, event_type: Type[DomainEvent]) -> int:
        return len(self._handlers.get(event_type, []))

    async def publish(self, event: DomainEvent) -> None:
        """
        Deliver an event and wait for every handler to finish.

        Args:
            event: Event instance; routed by its exact type.
        """
        handlers = list(self._handlers.get(type(event), []))
        if not handlers:
            logging.debug(f"No handlers for event {type(event).__name__}")
            return

        logging.debug(f"Publishing {type(event).__name__} to {len(handlers)} handler(s)")
        results = await asyncio.gather(
            *(handler(event) for handler in handlers), return_exceptions=True
        )
        for handler, result in zip(handlers, results):
            if isinstance(result, Exception):
                logging.error(
                    f"Unhandled exception in handler '{handler.__name__}' for event "
                    f"'{type(event).__name__}': {result}",
                    exc_info=(type(result), result, result.__traceback__),
                )
            elif isinstance(result, BaseException):
                raise result
