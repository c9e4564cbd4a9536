"""ORM Models — SQLAlchemy declarative models for both services.

Invariants:
    - All models inherit from Base (db/base.py)
    - UserRecord and TodoRecord live in separate stores; no FK spans them

Design Decisions:
    - One file per entity for locality
    - Each service creates only its own table (see infrastructure/database.create_tables)
"""

from todo_api.models.user import UserRecord  # noqa: F401
from todo_api.models.todo import TodoRecord  # noqa: F401
