"""User Field Validation — format rules for name and email before a user is accepted.

Invariants:
    - All functions are PURE: no IO, no registry access, no side effects
    - check_* returns a FieldViolation on failure, None on success
    - validate_user runs every check and collects all violations (one per field max)
    - Email format says nothing about uniqueness — UserRegistry owns that rule

Design Decisions:
    - Return values over exceptions: the route decides how violations become HTTP,
      keeping the error path identical to the success path
    - re.ASCII: \\s and [a-zA-Z] match the ASCII classes only, as declared in the
      OpenAPI contract
    - fullmatch over match: a trailing newline must not slip past the `$` anchor
"""

import re
from typing import Protocol

from user_api.core.domain_types import (
    EMAIL_PATTERN, NAME_MAX_LENGTH, NAME_PATTERN,
    FieldViolation, UserField, ViolationKind,
)

_NAME_RE = re.compile(NAME_PATTERN, re.ASCII)
_EMAIL_RE = re.compile(EMAIL_PATTERN, re.ASCII)


class UserCandidate(Protocol):
    """Anything carrying the caller-supplied User fields."""
    name: str | None
    email: str | None


def check_name(name: str | None) -> FieldViolation | None:
    """name: required, 1-100 chars, letters/digits/whitespace/period/hyphen."""
    if not name:
        return FieldViolation(
            UserField.NAME, ViolationKind.REQUIRED, "name is required",
        )
    if len(name) > NAME_MAX_LENGTH:
        return FieldViolation(
            UserField.NAME, ViolationKind.TOO_LONG,
            f"name must be at most {NAME_MAX_LENGTH} characters "
            f"(got {len(name)})",
        )
    if not _NAME_RE.fullmatch(name):
        return FieldViolation(
            UserField.NAME, ViolationKind.INVALID_FORMAT,
            "name may only contain letters, digits, whitespace, '.' and '-'",
        )
    return None


def check_email(email: str | None) -> FieldViolation | None:
    """email: required, local@domain.tld with a tld of 2+ letters."""
    if not email:
        return FieldViolation(
            UserField.EMAIL, ViolationKind.REQUIRED, "email is required",
        )
    if not _EMAIL_RE.fullmatch(email):
        return FieldViolation(
            UserField.EMAIL, ViolationKind.INVALID_FORMAT,
            "email must be a valid address such as name@example.com",
        )
    return None


def validate_user(candidate: UserCandidate) -> list[FieldViolation]:
    """Run all field checks. Empty list = candidate is well-formed."""
    results = (
        check_name(candidate.name),
        check_email(candidate.email),
    )
    return [v for v in results if v is not None]
