"""Root conftest — shared test configuration and store/service fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Argon2 runs with minimal cost parameters so hashing stays fast
"""

import os

import pytest

# Ensure tests never point at a real database
os.environ.setdefault("IDENTITY_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("TODO_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

from todo_api.core.password_hashing import HashParams  # noqa: E402
from todo_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from todo_api.infrastructure.todo_repository import SqlTodoRepository  # noqa: E402
from todo_api.infrastructure.user_repository import SqlUserRepository  # noqa: E402
from todo_api.services.identity_service import IdentityService  # noqa: E402
from todo_api.services.todo_service import TodoService  # noqa: E402

FAST_HASH_PARAMS = HashParams(
    memory_cost=1024, time_cost=1, parallelism=1, salt_len=16, hash_len=32,
)


@pytest.fixture
def hash_params() -> HashParams:
    return FAST_HASH_PARAMS


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_tables()
    yield manager
    await manager.dispose()


@pytest.fixture
def user_repo(db_manager):
    return SqlUserRepository(db_manager)


@pytest.fixture
def todo_repo(db_manager):
    return SqlTodoRepository(db_manager)


@pytest.fixture
def identity_service(user_repo, hash_params):
    return IdentityService(user_repo, hash_params)


@pytest.fixture
def todo_service(todo_repo):
    return TodoService(todo_repo)
