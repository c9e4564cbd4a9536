"""Settings — environment-driven configuration.

Tests:
    - postgresql:// URLs are rewritten for asyncpg
    - Argon2 settings assemble into HashParams
    - Login normalization is off by default
"""

from todo_api.config import Settings
from todo_api.core.password_hashing import HashParams


def test_postgres_url_rewritten_for_asyncpg():
    settings = Settings(
        identity_database_url="postgresql://u:p@db:5432/identity",
        todo_database_url="postgresql://u:p@db:5432/todo",
    )
    assert settings.identity_database_url == "postgresql+asyncpg://u:p@db:5432/identity"
    assert settings.todo_database_url == "postgresql+asyncpg://u:p@db:5432/todo"


def test_sqlite_url_untouched():
    settings = Settings(identity_database_url="sqlite+aiosqlite:///users.db")
    assert settings.identity_database_url == "sqlite+aiosqlite:///users.db"


def test_hash_params_from_settings():
    settings = Settings(
        password_hash_memory_cost=2048,
        password_hash_time_cost=3,
        password_hash_parallelism=1,
    )
    assert settings.hash_params() == HashParams(
        memory_cost=2048, time_cost=3, parallelism=1, salt_len=16, hash_len=32,
    )


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("NORMALIZE_LOGIN_FAILURES", "true")
    monkeypatch.setenv("PASSWORD_HASH_TIME_COST", "4")
    settings = Settings()
    assert settings.normalize_login_failures is True
    assert settings.password_hash_time_cost == 4


def test_login_normalization_off_by_default(monkeypatch):
    monkeypatch.delenv("NORMALIZE_LOGIN_FAILURES", raising=False)
    assert Settings().normalize_login_failures is False
