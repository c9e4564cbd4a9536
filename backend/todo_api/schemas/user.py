"""User Schemas — identity service request/response bodies.

Invariants:
    - Only a plaintext `password` is accepted on input; it is never echoed back
    - UserResponse has no hash field, so serializing a domain User cannot leak one
    - Empty strings are allowed through: emptiness is a service-layer rule (INVALID_INPUT)
"""

from datetime import datetime

from pydantic import BaseModel, Field

from todo_api.core.domain_types import UserId
from todo_api.core.entities import Credentials, User, UserCandidate, UserPatch


class UserCreate(BaseModel):
    """POST / body."""
    id: UserId | None = None
    username: str = Field("", max_length=255)
    password: str = ""

    def to_candidate(self) -> UserCandidate:
        return UserCandidate(
            username=self.username, password=self.password, id=self.id,
        )


class UserUpdate(BaseModel):
    """PUT /{id} body — every field optional."""
    id: UserId | None = None
    username: str | None = Field(None, max_length=255)
    password: str | None = None

    def to_patch(self) -> UserPatch:
        return UserPatch(
            id=self.id, username=self.username, password=self.password,
        )


class LoginRequest(BaseModel):
    """POST /login body."""
    username: str = ""
    password: str = ""

    def to_credentials(self) -> Credentials:
        return Credentials(username=self.username, password=self.password)


class UserResponse(BaseModel):
    """Public user representation."""
    id: UserId
    username: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserEnvelope(BaseModel):
    user: UserResponse


class UserListEnvelope(BaseModel):
    users: list[UserResponse]
