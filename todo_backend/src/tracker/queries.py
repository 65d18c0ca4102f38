from __future__ import annotations

from typing import List, NoReturn

from .effect import Effect
from .models import Todo, TodoStatus, to_projection
from .repositories import TodoRepository
from .schemas import TodoOut


# PUBLIC_INTERFACE
class GetAllTodos:
    """
    List todos newest first.

    Archived todos are dropped when `exclude_archived` is set. Todos created at
    the same instant keep the repository's iteration order.
    """

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def __call__(self, exclude_archived: bool) -> Effect[List[TodoOut], NoReturn]:
        def project(todos: List[Todo]) -> List[TodoOut]:
            visible = [
                t for t in todos
                if not (exclude_archived and t.status is TodoStatus.ARCHIVED)
            ]
            visible.sort(key=lambda t: t.created_at, reverse=True)
            return [to_projection(t) for t in visible]

        return self._repository.find_all().map(project)
