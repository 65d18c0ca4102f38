from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .commands import ArchiveTodo, CompleteTodo, CreateTodo, ReopenTodo
from .events import EventBus, InMemoryEventBus, log_event
from .queries import GetAllTodos
from .repositories import InMemoryRepository, TodoRepository
from .settings import Settings, get_settings
from .uow import UnitOfWork


# PUBLIC_INTERFACE
@dataclass
class Container:
    """
    Composition root: one repository and one event bus per application.

    Command factories take the unit of work for the current request, so every
    request batches its own events.
    """

    repository: TodoRepository
    bus: EventBus
    get_all: GetAllTodos = field(init=False)

    def __post_init__(self) -> None:
        self.get_all = GetAllTodos(self.repository)

    def create_uow(self) -> UnitOfWork:
        return UnitOfWork(self.bus)

    def create(self, uow: UnitOfWork) -> CreateTodo:
        return CreateTodo(self.repository, uow)

    def complete(self, uow: UnitOfWork) -> CompleteTodo:
        return CompleteTodo(self.repository, uow)

    def reopen(self, uow: UnitOfWork) -> ReopenTodo:
        return ReopenTodo(self.repository, uow)

    def archive(self, uow: UnitOfWork) -> ArchiveTodo:
        return ArchiveTodo(self.repository, uow)


# PUBLIC_INTERFACE
def build_container(settings: Optional[Settings] = None) -> Container:
    """Wire the in-memory repository and event bus, subscribing the event logger when enabled."""
    settings = settings or get_settings()
    bus = InMemoryEventBus()
    if settings.log_domain_events:
        bus.subscribe(log_event)
    return Container(repository=InMemoryRepository(), bus=bus)
