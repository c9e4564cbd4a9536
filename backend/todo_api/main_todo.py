"""Todo API — FastAPI application entry point for the todo service.

Run: uvicorn todo_api.main_todo:app --port 8081

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TodoApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Store, repository and service built in the lifespan and kept on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Only the todos table is created here; users belong to the other deployment
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api.api.error_handlers import register_error_handlers
from todo_api.api.routes import todos
from todo_api.config import get_settings
from todo_api.infrastructure.database import DatabaseSessionManager
from todo_api.infrastructure.observability import setup_logging
from todo_api.infrastructure.todo_repository import SqlTodoRepository
from todo_api.models.todo import TodoRecord
from todo_api.services.todo_service import TodoService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = DatabaseSessionManager(
        settings.todo_database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout_seconds,
    )
    await db.create_tables([TodoRecord.__table__])
    app.state.todo_service = TodoService(SqlTodoRepository(db))
    logger.info("Todo API started", extra={"service": "todo"})
    yield
    logger.info("Todo API shutting down", extra={"service": "todo"})
    await db.dispose()


app = FastAPI(title="Todo API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(todos.router)
register_error_handlers(app)
