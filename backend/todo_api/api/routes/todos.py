"""Todo Routes — HTTP surface of the todo service.

Invariants:
    - GET / lists everything unless ?owner=<uuid> is given, then only that owner's todos
    - Every path id must be a UUID (INVALID_IDENTIFIER otherwise)
    - DELETE is idempotent: unknown or already-deleted ids still answer 200
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from todo_api.api.dependencies import get_todo_service, require_identifier
from todo_api.core.domain_types import TodoId, UserId
from todo_api.core.errors import ServiceUnavailableError
from todo_api.schemas.status import StatusResponse
from todo_api.schemas.todo import (
    TodoCreate, TodoEnvelope, TodoListEnvelope, TodoResponse, TodoUpdate,
)
from todo_api.services.todo_service import TodoService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["todos"])


@router.get("/status", response_model=StatusResponse)
async def service_status(service: TodoService = Depends(get_todo_service)):
    """Readiness probe — includes database connectivity."""
    report = await service.health_check()
    if not report.ok:
        logger.error(f"Todo store unavailable: {report.error}")
        raise ServiceUnavailableError("database unreachable")
    return StatusResponse(status=report.status.value)


@router.get("/", response_model=TodoListEnvelope)
async def list_todos(
    owner: str | None = Query(None),
    service: TodoService = Depends(get_todo_service),
):
    if owner is not None:
        todos = await service.list_todos_by_owner(UserId(require_identifier(owner)))
    else:
        todos = await service.list_todos()
    return TodoListEnvelope(todos=[TodoResponse.from_todo(t) for t in todos])


@router.get("/{todo_id}", response_model=TodoEnvelope)
async def get_todo(
    todo_id: str, service: TodoService = Depends(get_todo_service),
):
    todo = await service.get_todo(TodoId(require_identifier(todo_id)))
    return TodoEnvelope(todo=TodoResponse.from_todo(todo))


@router.post(
    "/", response_model=TodoEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_todo(
    body: TodoCreate, service: TodoService = Depends(get_todo_service),
):
    todo = await service.create_todo(body.to_candidate())
    return TodoEnvelope(todo=TodoResponse.from_todo(todo))


@router.put("/{todo_id}", response_model=TodoEnvelope)
async def update_todo(
    todo_id: str,
    body: TodoUpdate,
    service: TodoService = Depends(get_todo_service),
):
    todo = await service.update_todo(TodoId(require_identifier(todo_id)), body.to_patch())
    return TodoEnvelope(todo=TodoResponse.from_todo(todo))


@router.delete("/{todo_id}")
async def delete_todo(
    todo_id: str, service: TodoService = Depends(get_todo_service),
):
    await service.delete_todo(TodoId(require_identifier(todo_id)))
    return {}
