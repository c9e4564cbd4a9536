"""Identity Routes — HTTP surface of the identity service.

Invariants:
    - GET /status → 200 when the store answers, 503 otherwise
    - GET /{id_or_username}: UUID-shaped segment → id lookup, anything else → username lookup
    - Responses carry UserResponse only (never the password hash)
    - /status and /login are declared before /{id_or_username} so they are matched first

Design Decisions:
    - Login normalization is opt-in (settings.normalize_login_failures): the service
      always distinguishes unknown user from wrong password, the wire may not
"""

import logging

from fastapi import APIRouter, Depends, status

from todo_api.api.dependencies import get_identity_service, require_identifier
from todo_api.config import Settings, get_settings
from todo_api.core.domain_types import UserId, parse_identifier
from todo_api.core.errors import (
    AuthenticationFailedError, ResourceNotFoundError, ServiceUnavailableError,
)
from todo_api.schemas.status import StatusResponse
from todo_api.schemas.user import (
    LoginRequest, UserCreate, UserEnvelope, UserListEnvelope, UserResponse,
    UserUpdate,
)
from todo_api.services.identity_service import IdentityService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["identity"])


@router.get("/status", response_model=StatusResponse)
async def service_status(
    service: IdentityService = Depends(get_identity_service),
):
    """Readiness probe — includes database connectivity."""
    report = await service.health_check()
    if not report.ok:
        logger.error(f"Identity store unavailable: {report.error}")
        raise ServiceUnavailableError("database unreachable")
    return StatusResponse(status=report.status.value)


@router.post(
    "/", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate,
    service: IdentityService = Depends(get_identity_service),
):
    user = await service.create_user(body.to_candidate())
    return UserEnvelope(user=UserResponse.from_user(user))


@router.get("/", response_model=UserListEnvelope)
async def list_users(
    service: IdentityService = Depends(get_identity_service),
):
    users = await service.list_users()
    return UserListEnvelope(users=[UserResponse.from_user(u) for u in users])


@router.post("/login", response_model=UserEnvelope)
async def login(
    body: LoginRequest,
    service: IdentityService = Depends(get_identity_service),
    settings: Settings = Depends(get_settings),
):
    """Single-shot credential check. Issues no session or token."""
    try:
        user = await service.authenticate_user(body.to_credentials())
    except ResourceNotFoundError:
        if settings.normalize_login_failures:
            raise AuthenticationFailedError() from None
        raise
    return UserEnvelope(user=UserResponse.from_user(user))


@router.get("/{id_or_username}", response_model=UserEnvelope)
async def get_user(
    id_or_username: str,
    service: IdentityService = Depends(get_identity_service),
):
    user_id = parse_identifier(id_or_username)
    if user_id is not None:
        user = await service.get_user_by_id(UserId(user_id))
    else:
        user = await service.find_user_by_username(id_or_username)
    return UserEnvelope(user=UserResponse.from_user(user))


@router.put("/{user_id}", response_model=UserEnvelope)
async def update_user(
    user_id: str,
    body: UserUpdate,
    service: IdentityService = Depends(get_identity_service),
):
    user = await service.update_user(UserId(require_identifier(user_id)), body.to_patch())
    return UserEnvelope(user=UserResponse.from_user(user))


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    service: IdentityService = Depends(get_identity_service),
):
    """Idempotent: deleting an unknown id is still 200."""
    await service.delete_user(UserId(require_identifier(user_id)))
    return {}
