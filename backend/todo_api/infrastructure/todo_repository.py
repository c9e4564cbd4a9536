"""Todo Repository — SQLAlchemy implementation of TodoRepository.

Invariants:
    - Every read filters deleted_at IS NULL: a soft-deleted todo is invisible
    - soft_delete only stamps active rows; a missing or already-deleted id is a no-op
    - update never touches owner_id

Design Decisions:
    - Soft delete keeps the row for audit; there is no purge path
"""

import logging
from datetime import datetime, timezone
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from todo_api.core.domain_types import HealthReport, TodoId, UserId
from todo_api.core.entities import Todo
from todo_api.core.errors import ConflictError
from todo_api.infrastructure.database import DatabaseSessionManager
from todo_api.infrastructure.user_repository import as_utc
from todo_api.models.todo import TodoRecord

logger = logging.getLogger(__name__)


def _to_todo(row: TodoRecord) -> Todo:
    return Todo(
        id=row.id,
        title=row.title,
        description=row.description,
        owner_id=row.owner_id,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


def _active():
    return select(TodoRecord).where(TodoRecord.deleted_at.is_(None))


class SqlTodoRepository:
    """Todo persistence over a DatabaseSessionManager."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def insert(self, todo: Todo) -> Todo:
        async with self._db.session() as session:
            row = TodoRecord(
                id=todo.id,
                title=todo.title,
                description=todo.description,
                owner_id=todo.owner_id,
            )
            session.add(row)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError(f"Todo '{todo.id}' already exists") from e
            await session.refresh(row)
            return _to_todo(row)

    async def get_by_id(self, todo_id: TodoId) -> Todo | None:
        async with self._db.session() as session:
            result = await session.execute(
                _active().where(TodoRecord.id == todo_id),
            )
            row = result.scalar_one_or_none()
            return _to_todo(row) if row else None

    async def update(
        self, todo_id: TodoId, *, title: str, description: str | None,
    ) -> None:
        async with self._db.session() as session:
            await session.execute(
                update(TodoRecord)
                .where(TodoRecord.id == todo_id)
                .where(TodoRecord.deleted_at.is_(None))
                .values(
                    title=title,
                    description=description,
                    updated_at=datetime.now(timezone.utc),
                ),
            )
            await session.commit()

    async def soft_delete(self, todo_id: TodoId) -> None:
        async with self._db.session() as session:
            result = await session.execute(
                update(TodoRecord)
                .where(TodoRecord.id == todo_id)
                .where(TodoRecord.deleted_at.is_(None))
                .values(deleted_at=datetime.now(timezone.utc)),
            )
            await session.commit()
            logger.debug(
                f"Soft-deleted {result.rowcount} todo row(s)",
                extra={"todo_id": str(todo_id)},
            )

    async def list_all(self) -> list[Todo]:
        async with self._db.session() as session:
            result = await session.execute(
                _active().order_by(TodoRecord.created_at),
            )
            return [_to_todo(row) for row in result.scalars().all()]

    async def list_by_owner(self, owner_id: UserId) -> list[Todo]:
        async with self._db.session() as session:
            result = await session.execute(
                _active()
                .where(TodoRecord.owner_id == owner_id)
                .order_by(TodoRecord.created_at),
            )
            return [_to_todo(row) for row in result.scalars().all()]

    async def ping(self) -> HealthReport:
        return await self._db.health_check()
