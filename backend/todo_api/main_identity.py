"""Identity API — FastAPI application entry point for the identity service.

Run: uvicorn todo_api.main_identity:app --port 8082

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TodoApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Store, repository and service built in the lifespan and kept on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Only the users table is created here; todos belong to the other deployment
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api.api.error_handlers import register_error_handlers
from todo_api.api.routes import identity
from todo_api.config import get_settings
from todo_api.infrastructure.database import DatabaseSessionManager
from todo_api.infrastructure.observability import setup_logging
from todo_api.infrastructure.user_repository import SqlUserRepository
from todo_api.models.user import UserRecord
from todo_api.services.identity_service import IdentityService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = DatabaseSessionManager(
        settings.identity_database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout_seconds,
    )
    await db.create_tables([UserRecord.__table__])
    app.state.identity_service = IdentityService(
        SqlUserRepository(db), settings.hash_params(),
    )
    logger.info("Identity API started", extra={"service": "identity"})
    yield
    logger.info("Identity API shutting down", extra={"service": "identity"})
    await db.dispose()


app = FastAPI(title="Identity API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(identity.router)
register_error_handlers(app)
