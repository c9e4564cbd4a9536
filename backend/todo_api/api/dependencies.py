"""API Dependencies — service lookup and identifier parsing for routes.

Invariants:
    - Services are read from app.state, where the lifespan placed them
    - A path/query identifier that is not a UUID is rejected with INVALID_IDENTIFIER

Design Decisions:
    - Plain functions used via Depends(): tests swap services with dependency_overrides
"""

from uuid import UUID

from fastapi import Request

from todo_api.core.domain_types import parse_identifier
from todo_api.core.errors import InvalidIdentifierError
from todo_api.services.identity_service import IdentityService
from todo_api.services.todo_service import TodoService


def get_identity_service(request: Request) -> IdentityService:
    return request.app.state.identity_service


def get_todo_service(request: Request) -> TodoService:
    return request.app.state.todo_service


def require_identifier(raw: str) -> UUID:
    """Parse a UUID path segment or raise InvalidIdentifierError."""
    parsed = parse_identifier(raw)
    if parsed is None:
        raise InvalidIdentifierError(raw)
    return parsed
