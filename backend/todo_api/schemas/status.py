"""Status Schema — health-check response body."""

from pydantic import BaseModel


class StatusResponse(BaseModel):
    status: str
