"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Each service reads its own database URL; the two never share a store

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - In-memory SQLite defaults: both services boot with zero infrastructure
    - Argon2 parameters live here, not in the hasher: operators tune cost per deployment
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from todo_api.core.password_hashing import HashParams


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database: one store per service
    identity_database_url: str = "sqlite+aiosqlite:///:memory:"
    todo_database_url: str = "sqlite+aiosqlite:///:memory:"

    @field_validator("identity_database_url", "todo_database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_pool_timeout_seconds: float = 30.0

    # Password hashing (Argon2id)
    password_hash_memory_cost: int = 64 * 1024  # KiB
    password_hash_time_cost: int = 1
    password_hash_parallelism: int = 2
    password_hash_salt_len: int = 16
    password_hash_hash_len: int = 32

    # Login hardening: answer 401 for unknown usernames as well
    normalize_login_failures: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def hash_params(self) -> HashParams:
        return HashParams(
            memory_cost=self.password_hash_memory_cost,
            time_cost=self.password_hash_time_cost,
            parallelism=self.password_hash_parallelism,
            salt_len=self.password_hash_salt_len,
            hash_len=self.password_hash_hash_len,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
