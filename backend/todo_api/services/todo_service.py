"""Todo Service — ownership-scoped todo lifecycle.

Invariants:
    - A todo cannot be created without an owner (None or nil UUID -> OwnerMissingError)
    - owner_id is immutable: an update naming another owner is rejected, never applied
    - Only title and description are ever written by update_todo
    - delete_todo is a soft delete and idempotent; deleted todos vanish from all reads

State machine:
    nonexistent -> active (create) -> active (update) -> deleted (delete, terminal)
"""

import logging
import uuid

from todo_api.core.domain_types import HealthReport, TodoId, UserId, is_nil
from todo_api.core.entities import Todo, TodoCandidate, TodoPatch
from todo_api.core.errors import (
    InconsistentIdentifierError, OwnerChangedError, OwnerMissingError,
    ResourceNotFoundError,
)
from todo_api.core.repository_protocols import TodoRepository

logger = logging.getLogger(__name__)


class TodoService:
    """Todo resource service."""

    def __init__(self, todos: TodoRepository):
        self._todos = todos

    async def create_todo(self, candidate: TodoCandidate) -> Todo:
        if is_nil(candidate.owner_id):
            raise OwnerMissingError()

        todo = Todo(
            id=TodoId(uuid.uuid4()) if is_nil(candidate.id) else candidate.id,
            title=candidate.title,
            description=candidate.description,
            owner_id=candidate.owner_id,
        )
        stored = await self._todos.insert(todo)
        logger.info(
            "Todo created",
            extra={"todo_id": str(stored.id), "owner_id": str(stored.owner_id)},
        )
        return stored

    async def get_todo(self, todo_id: TodoId) -> Todo:
        todo = await self._todos.get_by_id(todo_id)
        if todo is None:
            raise ResourceNotFoundError("Todo", str(todo_id))
        return todo

    async def update_todo(self, todo_id: TodoId, patch: TodoPatch) -> Todo:
        if not is_nil(patch.id) and patch.id != todo_id:
            raise InconsistentIdentifierError(str(todo_id), str(patch.id))

        current = await self.get_todo(todo_id)
        if not is_nil(patch.owner_id) and patch.owner_id != current.owner_id:
            raise OwnerChangedError(str(todo_id))

        await self._todos.update(
            todo_id,
            title=current.title if patch.title is None else patch.title,
            description=(
                current.description if patch.description is None
                else patch.description
            ),
        )
        logger.info("Todo updated", extra={"todo_id": str(todo_id)})
        return await self.get_todo(todo_id)

    async def delete_todo(self, todo_id: TodoId) -> None:
        await self._todos.soft_delete(todo_id)
        logger.info("Todo deleted", extra={"todo_id": str(todo_id)})

    async def list_todos(self) -> list[Todo]:
        return await self._todos.list_all()

    async def list_todos_by_owner(self, owner_id: UserId) -> list[Todo]:
        return await self._todos.list_by_owner(owner_id)

    async def health_check(self) -> HealthReport:
        return await self._todos.ping()
