"""User Repository — SQLAlchemy implementation of UserRepository.

Invariants:
    - Each call opens and closes its own session (no state between calls)
    - Username uniqueness is checked by the unique index at commit time, never by a pre-select
    - delete matching zero rows is success

Design Decisions:
    - Rows converted to frozen User dataclasses before leaving the session
"""

import logging
from datetime import datetime, timezone
from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError

from todo_api.core.domain_types import HealthReport, UserId
from todo_api.core.entities import User
from todo_api.core.errors import ConflictError
from todo_api.infrastructure.database import DatabaseSessionManager
from todo_api.models.user import UserRecord

logger = logging.getLogger(__name__)


def as_utc(value: datetime | None) -> datetime | None:
    """SQLite drops tzinfo on the way back; timestamps are always stored as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_user(row: UserRecord) -> User:
    return User(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlUserRepository:
    """User persistence over a DatabaseSessionManager."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def insert(self, user: User) -> User:
        async with self._db.session() as session:
            row = UserRecord(
                id=user.id,
                username=user.username,
                password_hash=user.password_hash,
            )
            session.add(row)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError(
                    f"User '{user.id}' or username '{user.username}' already exists",
                ) from e
            await session.refresh(row)
            return _to_user(row)

    async def get_by_id(self, user_id: UserId) -> User | None:
        async with self._db.session() as session:
            result = await session.execute(
                select(UserRecord).where(UserRecord.id == user_id),
            )
            row = result.scalar_one_or_none()
            return _to_user(row) if row else None

    async def get_by_username(self, username: str) -> User | None:
        async with self._db.session() as session:
            result = await session.execute(
                select(UserRecord).where(UserRecord.username == username),
            )
            row = result.scalar_one_or_none()
            return _to_user(row) if row else None

    async def update(
        self, user_id: UserId, *, username: str, password_hash: str,
    ) -> None:
        async with self._db.session() as session:
            try:
                await session.execute(
                    update(UserRecord)
                    .where(UserRecord.id == user_id)
                    .values(
                        username=username,
                        password_hash=password_hash,
                        updated_at=datetime.now(timezone.utc),
                    ),
                )
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                raise ConflictError(
                    f"Username '{username}' already exists",
                ) from e

    async def delete(self, user_id: UserId) -> None:
        async with self._db.session() as session:
            result = await session.execute(
                delete(UserRecord).where(UserRecord.id == user_id),
            )
            await session.commit()
            logger.debug(
                f"Deleted {result.rowcount} user row(s)",
                extra={"user_id": str(user_id)},
            )

    async def list_all(self) -> list[User]:
        async with self._db.session() as session:
            result = await session.execute(
                select(UserRecord).order_by(UserRecord.created_at),
            )
            return [_to_user(row) for row in result.scalars().all()]

    async def ping(self) -> HealthReport:
        return await self._db.health_check()
