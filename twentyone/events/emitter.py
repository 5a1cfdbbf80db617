"""
Event emitter for the twentyone engine.

This module provides the small publish/subscribe hub the shoe manager uses to
tell the table about reshuffles. Listeners subscribe per event type (or to
everything) with a priority; higher priorities run first.
"""

from collections import defaultdict
from enum import Enum
from typing import Any, Callable, Union
import threading

from twentyone.log import get_logger

logger = get_logger("events")


class EventPriority(Enum):
    """Priority levels for event handlers."""

    LOW = 0
    NORMAL = 1
    HIGH = 2
    CRITICAL = 3


class ShoeEventType(Enum):
    """Events published about the shoe."""

    RESHUFFLE_REQUIRED = "reshuffle_required"
    RESHUFFLE_OCCURRED = "reshuffle_occurred"


def _key(event_type: Union[str, Enum]) -> str:
    return event_type.name if isinstance(event_type, Enum) else event_type


class EventEmitter:
    """
    Priority-ordered event emitter.

    Features:
    - Supports event subscription with priorities
    - Allows once-only subscriptions
    - Supports subscribing to all events with event type filtering in handler
    - Listener registration is thread-safe; handlers run outside the lock
    """

    def __init__(self):
        """Initialize the event emitter."""
        self._listeners = defaultdict(list)
        self._global_listeners = []
        self._listener_lock = threading.RLock()

    @staticmethod
    def _insert(handlers: list, handler: dict) -> None:
        # Insert handler in order of priority (higher numbers first)
        for i, existing in enumerate(handlers):
            if existing["priority"] < handler["priority"]:
                handlers.insert(i, handler)
                break
        else:
            handlers.append(handler)

    @staticmethod
    def _remove(handlers: list, callback: Callable) -> None:
        for i, existing in enumerate(handlers):
            if existing["callback"] == callback:
                handlers.pop(i)
                break

    def on(
        self,
        event_type: Union[str, Enum],
        callback: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to subscribe to (string or enum)
            callback: Function to call when event occurs, signature: fn(event_data)
            priority: Priority level for this handler

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        event_type = _key(event_type)
        handler = {"callback": callback, "priority": priority.value}

        with self._listener_lock:
            self._insert(self._listeners[event_type], handler)

        def unsubscribe():
            with self._listener_lock:
                self._remove(self._listeners[event_type], callback)

        return unsubscribe

    def once(
        self,
        event_type: Union[str, Enum],
        callback: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable:
        """
        Subscribe to an event type for a single occurrence.

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        unsubscribe_ref = []

        def one_time_handler(event_data):
            try:
                callback(event_data)
            finally:
                # Unsubscribe in any case, even if callback raises an exception
                if unsubscribe_ref:
                    unsubscribe_ref[0]()

        unsubscribe_ref.append(self.on(event_type, one_time_handler, priority))
        return unsubscribe_ref[0]

    def on_any(
        self, callback: Callable, priority: EventPriority = EventPriority.NORMAL
    ) -> Callable:
        """
        Subscribe to all events.

        Args:
            callback: Function to call for any event, signature: fn((event_type, event_data))
            priority: Priority level for this handler
        """
        handler = {"callback": callback, "priority": priority.value}

        with self._listener_lock:
            self._insert(self._global_listeners, handler)

        def unsubscribe():
            with self._listener_lock:
                self._remove(self._global_listeners, callback)

        return unsubscribe

    def listener_count(self, event_type: Union[str, Enum, None] = None) -> int:
        with self._listener_lock:
            if event_type is None:
                return sum(len(h) for h in self._listeners.values()) + len(
                    self._global_listeners
                )
            return len(self._listeners.get(_key(event_type), []))

    def emit(self, event_type: Union[str, Enum], data: Any) -> None:
        """
        Emit an event to all registered listeners.

        A handler that raises is logged and skipped; the remaining handlers still run.

        Args:
            event_type: The type of event to emit
            data: The data to include with the event
        """
        event_type = _key(event_type)
        handlers_to_call = []

        with self._listener_lock:
            for handler in self._listeners.get(event_type, []):
                handlers_to_call.append((handler["callback"], data))
            for handler in self._global_listeners:
                handlers_to_call.append((handler["callback"], (event_type, data)))

        # Call handlers outside of the lock to avoid deadlocks
        for callback, args in handlers_to_call:
            try:
                callback(args)
            except Exception:
                logger.error("Error in event handler for %s", event_type, exc_info=True)

    def remove_all_listeners(self, event_type: Union[str, Enum, None] = None) -> None:
        """
        Remove all listeners for a specific event type or all events.
        """
        with self._listener_lock:
            if event_type is None:
                self._listeners.clear()
                self._global_listeners.clear()
            else:
                self._listeners[_key(event_type)].clear()
