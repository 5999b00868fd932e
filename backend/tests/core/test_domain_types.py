"""Domain Types — verifies rich type definitions and enum values.

Tests:
    - UserId wraps int
    - Enums serialize to their wire values
    - UserRecord is immutable
"""

import dataclasses

import pytest

from user_api.core.domain_types import (
    NAME_MAX_LENGTH, UserField, UserId, UserRecord, ViolationKind,
)


def test_user_id_wraps_int():
    assert UserId(7) == 7


def test_user_field_values_match_wire_names():
    assert {f.value for f in UserField} == {"name", "email"}


def test_violation_kind_has_three_kinds():
    assert set(ViolationKind) == {
        ViolationKind.REQUIRED,
        ViolationKind.TOO_LONG,
        ViolationKind.INVALID_FORMAT,
    }


def test_user_record_is_frozen():
    user = UserRecord(name="John", email="a@example.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        user.id = UserId(1)


def test_user_record_id_defaults_to_none():
    assert UserRecord(name="John", email="a@example.com").id is None


def test_name_limit():
    assert NAME_MAX_LENGTH == 100
