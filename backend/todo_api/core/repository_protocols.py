"""Boundary Protocols — contracts between the resource services and their stores.

Invariants:
    - Services NEVER import SQLAlchemy — dependency arrows point inward only
    - Lookups return None for "no row"; services decide whether that is NotFound
    - insert raises ConflictError on a uniqueness violation (store-enforced, atomic)
    - delete methods succeed whether or not a row matched

Design Decisions:
    - Protocol over ABC: structural subtyping, in-memory fakes need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from todo_api.core.domain_types import HealthReport, TodoId, UserId
from todo_api.core.entities import Todo, User


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def insert(self, user: User) -> User: ...
    async def get_by_id(self, user_id: UserId) -> User | None: ...
    async def get_by_username(self, username: str) -> User | None: ...
    async def update(
        self, user_id: UserId, *, username: str, password_hash: str,
    ) -> None: ...
    async def delete(self, user_id: UserId) -> None: ...
    async def list_all(self) -> list[User]: ...
    async def ping(self) -> HealthReport: ...


class TodoRepository(Protocol):
    """Contract for todo persistence — implemented by shell.

    Soft-deleted rows are invisible to every read.
    """
    async def insert(self, todo: Todo) -> Todo: ...
    async def get_by_id(self, todo_id: TodoId) -> Todo | None: ...
    async def update(
        self, todo_id: TodoId, *, title: str, description: str | None,
    ) -> None: ...
    async def soft_delete(self, todo_id: TodoId) -> None: ...
    async def list_all(self) -> list[Todo]: ...
    async def list_by_owner(self, owner_id: UserId) -> list[Todo]: ...
    async def ping(self) -> HealthReport: ...
