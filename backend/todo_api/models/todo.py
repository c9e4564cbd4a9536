"""Todo ORM — persists ownership-scoped todo items.

Invariants:
    - owner_id is non-nullable and never rewritten after insert
    - deleted_at NULL means active; non-NULL means soft-deleted (row kept for audit)

Design Decisions:
    - No ForeignKey on owner_id: users live in another service's database
    - Index on (owner_id, deleted_at): list-by-owner is the hot read path
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Index, String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from todo_api.db.base import Base


class TodoRecord(Base):
    """Stored todo row."""
    __tablename__ = "todos"
    __table_args__ = (
        Index("ix_todos_owner_active", "owner_id", "deleted_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(
        String(500), nullable=False, default="",
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    owner_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    def __repr__(self) -> str:
        return f"<TodoRecord(id={self.id}, owner_id={self.owner_id})>"
