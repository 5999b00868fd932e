"""User Field Validation — verifies name/email format rules.

Tests:
    - Valid candidate produces zero violations
    - Empty, too long, or disallowed-character names fail with a name violation
    - Malformed emails fail with an email violation
    - Violations are collected per field, never more than one per field
"""

import pytest

from user_api.core.domain_types import (
    FieldViolation, UserField, UserRecord, ViolationKind,
)
from user_api.core.validate_user import check_email, check_name, validate_user


def test_valid_user_has_no_violations():
    user = UserRecord(name="John Doe", email="john.doe@example.com")
    assert validate_user(user) == []


# --- name --------------------------------------------------------------------

@pytest.mark.parametrize("name", [
    "John Doe", "a", "J.R. Smith-Jones", "Agent 007", "a" * 100, "Tab\tName",
])
def test_accepts_valid_names(name):
    assert check_name(name) is None


def test_rejects_empty_name():
    violation = check_name("")
    assert violation.field == UserField.NAME
    assert violation.kind == ViolationKind.REQUIRED


def test_rejects_missing_name():
    assert check_name(None).kind == ViolationKind.REQUIRED


def test_rejects_too_long_name():
    violation = check_name("a" * 101)
    assert violation.kind == ViolationKind.TOO_LONG
    assert "101" in violation.message


@pytest.mark.parametrize("name", [
    "John_Doe", "john@doe", "Zoë", "O'Brien", "name!", "名前",
])
def test_rejects_disallowed_characters(name):
    violation = check_name(name)
    assert violation.field == UserField.NAME
    assert violation.kind == ViolationKind.INVALID_FORMAT


def test_too_long_checked_before_format():
    """A 101-char name with a bad char reports the length, not the format."""
    assert check_name("_" * 101).kind == ViolationKind.TOO_LONG


# --- email -------------------------------------------------------------------

@pytest.mark.parametrize("email", [
    "john.doe@example.com",
    "a@example.com",
    "first+tag@sub.example.co",
    "x_y%z@mail-server.org",
])
def test_accepts_valid_emails(email):
    assert check_email(email) is None


@pytest.mark.parametrize("email", [
    "invalid", "@example.com", "john@", "john@.com", "@.com",
    "john@example", "john@example.c", "john doe@example.com",
    "john@example.com\n",
])
def test_rejects_invalid_emails(email):
    violation = check_email(email)
    assert violation.field == UserField.EMAIL
    assert violation.kind == ViolationKind.INVALID_FORMAT


def test_rejects_empty_email():
    assert check_email("").kind == ViolationKind.REQUIRED
    assert check_email(None).kind == ViolationKind.REQUIRED


# --- validate_user -----------------------------------------------------------

def test_collects_one_violation_per_failing_field():
    user = UserRecord(name="", email="invalid")
    violations = validate_user(user)
    assert [v.field for v in violations] == [UserField.NAME, UserField.EMAIL]


def test_only_failing_field_reported():
    violations = validate_user(UserRecord(name="John Doe", email="john@"))
    assert len(violations) == 1
    assert violations[0].field == UserField.EMAIL


def test_violation_carries_message():
    (violation,) = validate_user(UserRecord(name="bad_name", email="a@b.io"))
    assert isinstance(violation, FieldViolation)
    assert "name" in violation.message


def test_validate_is_deterministic():
    user = UserRecord(name="x" * 150, email="@.com")
    assert validate_user(user) == validate_user(user)
