from __future__ import annotations

import logging
from typing import List, Tuple

from .events import EventBus, TodoEvent

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class UnitOfWork:
    """
    Collects domain events raised during one operation.

    Events stay private to the unit of work until `commit()` hands them to the
    bus. Callers commit only after the operation's Effect resolved to Ok; on
    failure the unit of work is simply dropped.
    """

    def __init__(self, bus: EventBus) -> None:
        self._bus = bus
        self._events: List[TodoEvent] = []

    @property
    def events(self) -> Tuple[TodoEvent, ...]:
        """Snapshot of the pending events in enqueue order."""
        return tuple(self._events)

    def add(self, event: TodoEvent) -> None:
        self._events.append(event)

    def commit(self) -> None:
        """Publish pending events in enqueue order, then clear the queue."""
        pending, self._events = self._events, []
        for event in pending:
            logger.debug(
                "Publishing %s for %s",
                event.type.value,
                event.todo_id.unwrap(),
                extra={"event_type": event.type.value, "todo_id": event.todo_id.unwrap()},
            )
            self._bus.publish(event)
