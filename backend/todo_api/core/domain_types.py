"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, TodoId wrap UUIDs — never use bare UUID in domain logic
    - NIL_ID (all-zero UUID) and None both mean "no identifier"
    - ServiceStatus is two-valued: a store is reachable or it is not

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
TodoId = NewType("TodoId", UUID)

NIL_ID = UUID(int=0)


def is_nil(value: UUID | None) -> bool:
    """True for None and for the all-zero UUID."""
    return value is None or value == NIL_ID


def parse_identifier(raw: str) -> UUID | None:
    """Parse a canonical UUID string, or return None if it is not one."""
    try:
        return UUID(raw)
    except (ValueError, AttributeError, TypeError):
        return None


# ─── Enums ───────────────────────────────────────────────────────

class ServiceStatus(str, Enum):
    """Health-check outcome."""
    OK = "ok"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class HealthReport:
    """Health-check result: status plus the underlying error, if any."""
    status: ServiceStatus
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ServiceStatus.OK
