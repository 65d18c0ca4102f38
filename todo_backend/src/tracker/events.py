from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from threading import RLock
from typing import Callable, Dict

from .values import Timestamp, TodoId

logger = logging.getLogger(__name__)


class EventType(str, Enum):
    CREATED = "Created"
    COMPLETED = "Completed"
    REOPENED = "Reopened"
    ARCHIVED = "Archived"


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class TodoEvent:
    """Immutable record of a todo state change."""

    type: EventType
    todo_id: TodoId
    at: Timestamp = field(default_factory=Timestamp.now)

    @classmethod
    def created(cls, todo_id: TodoId) -> "TodoEvent":
        return cls(EventType.CREATED, todo_id)

    @classmethod
    def completed(cls, todo_id: TodoId) -> "TodoEvent":
        return cls(EventType.COMPLETED, todo_id)

    @classmethod
    def reopened(cls, todo_id: TodoId) -> "TodoEvent":
        return cls(EventType.REOPENED, todo_id)

    @classmethod
    def archived(cls, todo_id: TodoId) -> "TodoEvent":
        return cls(EventType.ARCHIVED, todo_id)


EventHandler = Callable[[TodoEvent], None]
Unsubscribe = Callable[[], None]


# PUBLIC_INTERFACE
class EventBus(ABC):
    """Abstract contract for publishing todo events to subscribers."""

    @abstractmethod
    def publish(self, event: TodoEvent) -> None:
        """Deliver the event to every current subscriber, synchronously."""

    @abstractmethod
    def subscribe(self, handler: EventHandler) -> Unsubscribe:
        """Register a handler and return a callable that removes it again."""


class InMemoryEventBus(EventBus):
    """
    Synchronous in-process fan-out.

    Handlers run in subscription order. An exception raised by a handler
    propagates to the publisher.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._handlers: Dict[int, EventHandler] = {}
        self._next_token = 0

    def publish(self, event: TodoEvent) -> None:
        with self._lock:
            handlers = list(self._handlers.values())
        for handler in handlers:
            handler(event)

    def subscribe(self, handler: EventHandler) -> Unsubscribe:
        with self._lock:
            token = self._next_token
            self._next_token += 1
            self._handlers[token] = handler

        def unsubscribe() -> None:
            with self._lock:
                self._handlers.pop(token, None)

        return unsubscribe


def log_event(event: TodoEvent) -> None:
    """Event bus subscriber that writes every published event to the log."""
    logger.info(
        "[Event] %s: %s",
        event.type.value,
        event.todo_id.unwrap(),
        extra={"event_type": event.type.value, "todo_id": event.todo_id.unwrap()},
    )
