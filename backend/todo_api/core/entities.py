"""Domain Entities — plain dataclasses passed between services and repositories.

Invariants:
    - A persisted User always has a non-nil id and a non-empty username
    - User.password_hash is internal: transport schemas never serialize it
    - Todo.owner_id is immutable once persisted
    - Candidates/patches carry caller input; entities carry stored state

Design Decisions:
    - Dataclasses over ORM rows: services never hold a live SQLAlchemy session
    - Patch fields default to None meaning "not supplied", so partial updates keep stored values
"""

from dataclasses import dataclass, field
from datetime import datetime

from todo_api.core.domain_types import TodoId, UserId


@dataclass(frozen=True)
class User:
    id: UserId
    username: str
    password_hash: str = field(default="", repr=False)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class UserCandidate:
    """Input to create_user."""
    username: str
    password: str = field(repr=False)
    id: UserId | None = None


@dataclass(frozen=True)
class UserPatch:
    """Input to update_user. Empty username/password leave stored values untouched."""
    id: UserId | None = None
    username: str | None = None
    password: str | None = field(default=None, repr=False)


@dataclass(frozen=True)
class Credentials:
    """Input to authenticate_user."""
    username: str = ""
    password: str = field(default="", repr=False)


@dataclass(frozen=True)
class Todo:
    id: TodoId
    title: str
    owner_id: UserId
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class TodoCandidate:
    """Input to create_todo."""
    owner_id: UserId | None
    title: str = ""
    description: str | None = None
    id: TodoId | None = None


@dataclass(frozen=True)
class TodoPatch:
    """Input to update_todo. Only title and description are ever applied."""
    id: TodoId | None = None
    title: str | None = None
    description: str | None = None
    owner_id: UserId | None = None
