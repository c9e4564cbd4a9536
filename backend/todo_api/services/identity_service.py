"""Identity Service — user lifecycle and single-shot credential verification.

Invariants:
    - create_user rejects an empty username or password before touching the store
    - The plaintext password is hashed with the configured HashParams and then dropped
    - authenticate_user: unknown username -> ResourceNotFoundError,
      wrong password -> AuthenticationFailedError, corrupt hash -> CredentialHashError
    - delete_user is idempotent; get_user_by_id is not (deliberate asymmetry)
    - No mutable state besides the injected repository and HashParams

Design Decisions:
    - Argon2 runs in a worker thread (asyncio.to_thread): hashing is CPU-bound and
      would otherwise stall every other request on the event loop
    - update_user reloads after writing so callers see exactly what the store holds
"""

import asyncio
import logging
import uuid

from todo_api.core.domain_types import HealthReport, UserId, is_nil
from todo_api.core.entities import Credentials, User, UserCandidate, UserPatch
from todo_api.core.errors import (
    AuthenticationFailedError, InconsistentIdentifierError, InvalidInputError,
    ResourceNotFoundError,
)
from todo_api.core.password_hashing import (
    HashParams, hash_password, needs_rehash, verify_password,
)
from todo_api.core.repository_protocols import UserRepository

logger = logging.getLogger(__name__)


class IdentityService:
    """User resource service."""

    def __init__(self, users: UserRepository, hash_params: HashParams):
        self._users = users
        self._hash_params = hash_params

    async def _hash(self, password: str) -> str:
        return await asyncio.to_thread(hash_password, password, self._hash_params)

    async def create_user(self, candidate: UserCandidate) -> User:
        if not candidate.username:
            raise InvalidInputError("username is required", field="username")
        if not candidate.password:
            raise InvalidInputError("password is required", field="password")

        user = User(
            id=UserId(uuid.uuid4()) if is_nil(candidate.id) else candidate.id,
            username=candidate.username,
            password_hash=await self._hash(candidate.password),
        )
        stored = await self._users.insert(user)
        logger.info("User created", extra={"user_id": str(stored.id)})
        return stored

    async def get_user_by_id(self, user_id: UserId) -> User:
        user = await self._users.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundError("User", str(user_id))
        return user

    async def find_user_by_username(self, username: str) -> User:
        user = await self._users.get_by_username(username)
        if user is None:
            raise ResourceNotFoundError("User", username)
        return user

    async def update_user(self, user_id: UserId, patch: UserPatch) -> User:
        if not is_nil(patch.id) and patch.id != user_id:
            raise InconsistentIdentifierError(str(user_id), str(patch.id))

        current = await self.get_user_by_id(user_id)
        password_hash = current.password_hash
        if patch.password:
            password_hash = await self._hash(patch.password)

        await self._users.update(
            user_id,
            username=patch.username or current.username,
            password_hash=password_hash,
        )
        logger.info(
            "User updated",
            extra={"user_id": str(user_id)},
        )
        return await self.get_user_by_id(user_id)

    async def authenticate_user(self, credentials: Credentials) -> User:
        """Verify username/password once. No session or token is issued."""
        if not credentials.username and not credentials.password:
            raise InvalidInputError(
                "username and password are required", field="username",
            )

        user = await self.find_user_by_username(credentials.username)
        matched = await asyncio.to_thread(
            verify_password, credentials.password, user.password_hash,
        )
        if not matched:
            logger.info(
                "Authentication failed", extra={"user_id": str(user.id)},
            )
            raise AuthenticationFailedError()

        if needs_rehash(user.password_hash, self._hash_params):
            # Verification used the embedded parameters; flag the stale cost settings.
            logger.info(
                "Password hash uses outdated parameters",
                extra={"user_id": str(user.id)},
            )
        return user

    async def delete_user(self, user_id: UserId) -> None:
        await self._users.delete(user_id)
        logger.info("User deleted", extra={"user_id": str(user_id)})

    async def list_users(self) -> list[User]:
        return await self._users.list_all()

    async def health_check(self) -> HealthReport:
        return await self._users.ping()
