"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps int (64-bit range) — assigned only by UserRegistry
    - UserRecord is frozen: a stored user never changes after creation
    - All violation kinds and field names encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Format constants live here so schemas/ and validate_user share one source
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Format Constraints ──────────────────────────────────────────

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 100
NAME_PATTERN = r"^[a-zA-Z0-9\s.-]+$"
EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"


# ─── Enums ───────────────────────────────────────────────────────

class UserField(str, Enum):
    """Caller-supplied User fields subject to format validation."""
    NAME = "name"
    EMAIL = "email"


class ViolationKind(str, Enum):
    """Why a field failed validation."""
    REQUIRED = "required"
    TOO_LONG = "too_long"
    INVALID_FORMAT = "invalid_format"


# ─── Values ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class UserRecord:
    """A user as seen by the core. id is None until the registry stores it."""
    name: str
    email: str
    id: UserId | None = None


@dataclass(frozen=True)
class FieldViolation:
    """One failing field, with enough detail for a field-level error message."""
    field: UserField
    kind: ViolationKind
    message: str


@dataclass(frozen=True)
class EmailConflict:
    """Creation rejected: a stored user already owns this email."""
    email: str
    existing_id: UserId
