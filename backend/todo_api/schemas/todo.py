"""Todo Schemas — todo service request/response bodies.

Invariants:
    - owner_id is optional at the schema level so a missing owner reaches the
      service and yields OWNER_MISSING rather than a generic validation error
    - TodoUpdate leaves unset fields as None: the service keeps stored values
"""

from datetime import datetime

from pydantic import BaseModel, Field

from todo_api.core.domain_types import TodoId, UserId
from todo_api.core.entities import Todo, TodoCandidate, TodoPatch


class TodoCreate(BaseModel):
    """POST / body."""
    id: TodoId | None = None
    title: str = Field("", max_length=500)
    description: str | None = None
    owner_id: UserId | None = None

    def to_candidate(self) -> TodoCandidate:
        return TodoCandidate(
            owner_id=self.owner_id,
            title=self.title,
            description=self.description,
            id=self.id,
        )


class TodoUpdate(BaseModel):
    """PUT /{id} body."""
    id: TodoId | None = None
    title: str | None = Field(None, max_length=500)
    description: str | None = None
    owner_id: UserId | None = None

    def to_patch(self) -> TodoPatch:
        return TodoPatch(
            id=self.id,
            title=self.title,
            description=self.description,
            owner_id=self.owner_id,
        )


class TodoResponse(BaseModel):
    """Public todo representation."""
    id: TodoId
    title: str
    description: str | None = None
    owner_id: UserId
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_todo(cls, todo: Todo) -> "TodoResponse":
        return cls(
            id=todo.id,
            title=todo.title,
            description=todo.description,
            owner_id=todo.owner_id,
            created_at=todo.created_at,
            updated_at=todo.updated_at,
        )


class TodoEnvelope(BaseModel):
    todo: TodoResponse


class TodoListEnvelope(BaseModel):
    todos: list[TodoResponse]
