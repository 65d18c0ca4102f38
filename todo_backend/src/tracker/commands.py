"""
Command handlers for the todo lifecycle.

Every handler is built from a repository and a unit of work and is then called
with the request. The returned Effect performs, in order: validate, load,
guard, transition, persist, enqueue the event. Events are only enqueued on the
success path; publishing them is left to whoever commits the unit of work.
"""
from __future__ import annotations

from typing import ClassVar, List, Optional, Tuple

from .effect import Effect, Err
from .errors import (
    CommandError,
    FieldError,
    InvalidIdError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from .events import TodoEvent
from .models import (
    Todo,
    TodoStatus,
    archive_todo,
    complete_todo,
    create_todo,
    reopen_todo,
    to_projection,
)
from .repositories import TodoRepository
from .schemas import CreateTodoRequest, TodoOut
from .uow import UnitOfWork
from .values import Priority, TodoDescription, TodoId, TodoTitle


# PUBLIC_INTERFACE
class CreateTodo:
    """Validate the request, store a new active todo and enqueue Created."""

    def __init__(self, repository: TodoRepository, uow: UnitOfWork) -> None:
        self._repository = repository
        self._uow = uow

    def __call__(self, request: CreateTodoRequest) -> Effect[TodoOut, CommandError]:
        title = TodoTitle.create(request.title)
        description = TodoDescription.create(request.description)
        priority = Priority.create(request.priority)

        errors: List[FieldError] = []
        for name, result in (("title", title), ("description", description), ("priority", priority)):
            if isinstance(result, Err):
                errors.append(FieldError(field=name, message=result.error))
        if errors:
            return Effect.fail(ValidationError(errors=errors))

        todo = create_todo(TodoId.generate(), title.value, description.value, priority.value)
        return self._repository.save(todo).map(self._record)

    def _record(self, saved: Todo) -> TodoOut:
        self._uow.add(TodoEvent.created(saved.id))
        return to_projection(saved)


class _TransitionCommand:
    """
    Shared shape of complete/reopen/archive.

    Subclasses declare the states they accept and provide the transition and
    the event to enqueue.
    """

    allowed: ClassVar[Tuple[TodoStatus, ...]] = ()

    def __init__(self, repository: TodoRepository, uow: UnitOfWork) -> None:
        self._repository = repository
        self._uow = uow

    def __call__(self, todo_id: str) -> Effect[TodoOut, CommandError]:
        parsed = TodoId.parse(todo_id)
        if isinstance(parsed, Err):
            return Effect.fail(InvalidIdError(message=parsed.error))
        return self._repository.find_by_id(parsed.value).flat_map(self._apply)

    def _apply(self, todo: Optional[Todo]) -> Effect[TodoOut, CommandError]:
        if todo is None:
            return Effect.fail(NotFoundError())
        if todo.status not in self.allowed:
            expected = "|".join(status.value for status in self.allowed)
            return Effect.fail(InvalidStateError(expected=expected, actual=todo.status.value))
        return self._repository.save(self._transition(todo)).map(self._record)

    def _record(self, saved: Todo) -> TodoOut:
        self._uow.add(self._event(saved))
        return to_projection(saved)

    def _transition(self, todo: Todo) -> Todo:
        raise NotImplementedError

    def _event(self, todo: Todo) -> TodoEvent:
        raise NotImplementedError


# PUBLIC_INTERFACE
class CompleteTodo(_TransitionCommand):
    """Active -> Completed."""

    allowed = (TodoStatus.ACTIVE,)

    def _transition(self, todo):
        return complete_todo(todo)

    def _event(self, todo):
        return TodoEvent.completed(todo.id)


# PUBLIC_INTERFACE
class ReopenTodo(_TransitionCommand):
    """Completed -> Active."""

    allowed = (TodoStatus.COMPLETED,)

    def _transition(self, todo):
        return reopen_todo(todo)

    def _event(self, todo):
        return TodoEvent.reopened(todo.id)


# PUBLIC_INTERFACE
class ArchiveTodo(_TransitionCommand):
    """Active or Completed -> Archived."""

    allowed = (TodoStatus.ACTIVE, TodoStatus.COMPLETED)

    def _transition(self, todo):
        return archive_todo(todo)

    def _event(self, todo):
        return TodoEvent.archived(todo.id)
