from __future__ import annotations

from abc import ABC, abstractmethod
from threading import RLock
from typing import Dict, List, NoReturn, Optional

from .effect import Effect
from .models import Todo
from .values import TodoId


# PUBLIC_INTERFACE
class TodoRepository(ABC):
    """Abstract repository contract for todo storage backends. Reads and writes never fail."""

    @abstractmethod
    def find_by_id(self, todo_id: TodoId) -> Effect[Optional[Todo], NoReturn]:
        """Return the stored todo for the id, or None."""

    @abstractmethod
    def find_all(self) -> Effect[List[Todo], NoReturn]:
        """Return every stored todo in store iteration order."""

    @abstractmethod
    def save(self, todo: Todo) -> Effect[Todo, NoReturn]:
        """Insert or replace the todo keyed by its id and return it."""


class InMemoryRepository(TodoRepository):
    """
    Thread-safe in-memory repository; the only backend this service ships.

    Every operation touches the store when its Effect is run, not when it is
    built. Todos are immutable values, so stored items are handed out as-is.
    Iteration order is the order in which ids were first saved.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: Dict[str, Todo] = {}

    def find_by_id(self, todo_id: TodoId) -> Effect[Optional[Todo], NoReturn]:
        def read() -> Optional[Todo]:
            with self._lock:
                return self._items.get(todo_id.unwrap())

        return Effect.from_callable(read)

    def find_all(self) -> Effect[List[Todo], NoReturn]:
        def read() -> List[Todo]:
            with self._lock:
                return list(self._items.values())

        return Effect.from_callable(read)

    def save(self, todo: Todo) -> Effect[Todo, NoReturn]:
        def write() -> Todo:
            with self._lock:
                self._items[todo.id.unwrap()] = todo
            return todo

        return Effect.from_callable(write)
