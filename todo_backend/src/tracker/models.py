from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union

from .schemas import TodoOut
from .values import Priority, Timestamp, TodoDescription, TodoId, TodoTitle


# PUBLIC_INTERFACE
class TodoStatus(str, Enum):
    """Variant tag of a todo; the string value is what clients see as `status`."""

    ACTIVE = "Active"
    COMPLETED = "Completed"
    ARCHIVED = "Archived"


@dataclass(frozen=True)
class ActiveTodo:
    """
    A todo that is open for work. Initial state, and the target of reopen.

    Fields shared by every variant:
    - id: branded identifier
    - title: validated, trimmed title
    - description: optional description (None when absent)
    - priority: Low/Medium/High
    - created_at: instant of creation, carried through every transition
    """

    status: ClassVar[TodoStatus] = TodoStatus.ACTIVE

    id: TodoId
    title: TodoTitle
    description: Optional[TodoDescription]
    priority: Priority
    created_at: Timestamp


@dataclass(frozen=True)
class CompletedTodo:
    """A finished todo. Only reachable from ActiveTodo."""

    status: ClassVar[TodoStatus] = TodoStatus.COMPLETED

    id: TodoId
    title: TodoTitle
    description: Optional[TodoDescription]
    priority: Priority
    created_at: Timestamp
    completed_at: Timestamp


@dataclass(frozen=True)
class ArchivedTodo:
    """Terminal state. Never carries completed_at."""

    status: ClassVar[TodoStatus] = TodoStatus.ARCHIVED

    id: TodoId
    title: TodoTitle
    description: Optional[TodoDescription]
    priority: Priority
    created_at: Timestamp
    archived_at: Timestamp


Todo = Union[ActiveTodo, CompletedTodo, ArchivedTodo]


# Transitions. Preconditions are checked by the command handlers.

def create_todo(
    todo_id: TodoId,
    title: TodoTitle,
    description: Optional[TodoDescription],
    priority: Priority,
) -> ActiveTodo:
    return ActiveTodo(
        id=todo_id,
        title=title,
        description=description,
        priority=priority,
        created_at=Timestamp.now(),
    )


def complete_todo(todo: ActiveTodo) -> CompletedTodo:
    return CompletedTodo(
        id=todo.id,
        title=todo.title,
        description=todo.description,
        priority=todo.priority,
        created_at=todo.created_at,
        completed_at=Timestamp.now(),
    )


def reopen_todo(todo: CompletedTodo) -> ActiveTodo:
    return ActiveTodo(
        id=todo.id,
        title=todo.title,
        description=todo.description,
        priority=todo.priority,
        created_at=todo.created_at,
    )


def archive_todo(todo: Union[ActiveTodo, CompletedTodo]) -> ArchivedTodo:
    return ArchivedTodo(
        id=todo.id,
        title=todo.title,
        description=todo.description,
        priority=todo.priority,
        created_at=todo.created_at,
        archived_at=Timestamp.now(),
    )


# PUBLIC_INTERFACE
def to_projection(todo: Todo) -> TodoOut:
    """
    Flatten a todo into the serialization-ready TodoOut.

    completed_at is only set for CompletedTodo and archived_at only for
    ArchivedTodo; both stay None otherwise.
    """
    return TodoOut(
        id=todo.id.unwrap(),
        title=todo.title.unwrap(),
        description=todo.description.unwrap() if todo.description else None,
        priority=todo.priority.value,
        status=todo.status.value,
        created_at=todo.created_at.to_iso(),
        completed_at=todo.completed_at.to_iso() if isinstance(todo, CompletedTodo) else None,
        archived_at=todo.archived_at.to_iso() if isinstance(todo, ArchivedTodo) else None,
    )
