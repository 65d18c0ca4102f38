from __future__ import annotations

import logging
from typing import List, Union

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import JSONResponse

from ..container import Container
from ..effect import Effect, Err
from ..errors import CommandError
from ..schemas import CreateTodoRequest, TodoOut
from ..uow import UnitOfWork

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/todos",
    tags=["todos"],
)

_ERROR_RESPONSES = {
    400: {"description": "Invalid id, invalid input or transition not allowed in the current state"},
    404: {"description": "Todo not found"},
}


def get_container(request: Request) -> Container:
    """
    Dependency returning the composition root built for this application.
    """
    return request.app.state.container


async def _execute(
    effect: Effect[TodoOut, CommandError],
    uow: UnitOfWork,
    path: str,
) -> Union[TodoOut, JSONResponse]:
    """
    Run a command effect. Commit the unit of work only when it succeeded;
    otherwise translate the error value into a JSON error reply.
    """
    result = await effect.run()
    if isinstance(result, Err):
        error = result.error
        logger.info(
            "Command rejected: %s",
            error.tag,
            extra={"error_tag": error.tag, "path": path},
        )
        return JSONResponse(status_code=error.http_status, content={"error": error.to_response()})
    uow.commit()
    return result.value


# PUBLIC_INTERFACE
@router.post(
    "/",
    response_model=TodoOut,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new active Todo item and return its projection.",
    responses={
        201: {"description": "Todo created successfully"},
        400: {"description": "Validation error listing every invalid field"},
    },
)
async def create_todo(
    payload: CreateTodoRequest,
    request: Request,
    container: Container = Depends(get_container),
):
    """
    Create a new Todo.
    """
    uow = container.create_uow()
    return await _execute(container.create(uow)(payload), uow, request.url.path)


# PUBLIC_INTERFACE
@router.get(
    "/",
    response_model=List[TodoOut],
    response_model_exclude_none=True,
    summary="List Todos",
    description=(
        "List todos, newest first.\n\n"
        "Query parameters:\n"
        "- include_archived: also return archived todos (default: false)"
    ),
    responses={200: {"description": "List retrieved successfully"}},
)
async def list_todos(
    include_archived: bool = Query(False, description="Include archived todos"),
    container: Container = Depends(get_container),
) -> List[TodoOut]:
    """
    List todos. The query never fails.
    """
    result = await container.get_all(not include_archived).run()
    return result.value


# PUBLIC_INTERFACE
@router.post(
    "/{todo_id}/complete",
    response_model=TodoOut,
    response_model_exclude_none=True,
    summary="Complete Todo",
    description="Mark an active Todo as completed.",
    responses=_ERROR_RESPONSES,
)
async def complete_todo(todo_id: str, request: Request, container: Container = Depends(get_container)):
    """
    Active -> Completed.
    """
    uow = container.create_uow()
    return await _execute(container.complete(uow)(todo_id), uow, request.url.path)


# PUBLIC_INTERFACE
@router.post(
    "/{todo_id}/reopen",
    response_model=TodoOut,
    response_model_exclude_none=True,
    summary="Reopen Todo",
    description="Move a completed Todo back to active.",
    responses=_ERROR_RESPONSES,
)
async def reopen_todo(todo_id: str, request: Request, container: Container = Depends(get_container)):
    """
    Completed -> Active.
    """
    uow = container.create_uow()
    return await _execute(container.reopen(uow)(todo_id), uow, request.url.path)


# PUBLIC_INTERFACE
@router.post(
    "/{todo_id}/archive",
    response_model=TodoOut,
    response_model_exclude_none=True,
    summary="Archive Todo",
    description="Archive an active or completed Todo. Archived todos cannot change again.",
    responses=_ERROR_RESPONSES,
)
async def archive_todo(todo_id: str, request: Request, container: Container = Depends(get_container)):
    """
    Active | Completed -> Archived.
    """
    uow = container.create_uow()
    return await _execute(container.archive(uow)(todo_id), uow, request.url.path)
