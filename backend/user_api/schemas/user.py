"""User Schema — the single User representation shared by request and response bodies.

Invariants:
    - name and email are required; id is read-only and ignored on input
    - Declared pattern/length constraints match core/validate_user exactly
    - Pydantic checks presence and type only; format is checked by validate_user
      so violations come back as one structured list

Design Decisions:
    - Constraints in json_schema_extra (documented, not enforced by Pydantic):
      a single validator implementation, and the OpenAPI document still declares
      every rule for clients
    - from_attributes: responses are built straight from core UserRecord values
    - Wrap validator on id: a malformed client id (e.g. "abc") becomes None instead
      of a 400, while stored integer ids still validate for responses
"""

from pydantic import (
    BaseModel, ConfigDict, Field, ValidationError, field_validator,
)

from user_api.core.domain_types import (
    EMAIL_PATTERN, NAME_MAX_LENGTH, NAME_MIN_LENGTH, NAME_PATTERN,
    UserRecord,
)


class User(BaseModel):
    """A user account. id is assigned by the server."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = Field(
        None,
        description="Server-assigned identifier",
        json_schema_extra={"readOnly": True, "format": "int64"},
    )
    name: str = Field(
        description="Display name",
        json_schema_extra={
            "minLength": NAME_MIN_LENGTH,
            "maxLength": NAME_MAX_LENGTH,
            "pattern": NAME_PATTERN,
        },
    )
    email: str = Field(
        description="Unique email address",
        json_schema_extra={"format": "email", "pattern": EMAIL_PATTERN},
    )

    @field_validator("id", mode="wrap")
    @classmethod
    def ignore_malformed_id(cls, v, handler):
        try:
            return handler(v)
        except ValidationError:
            return None

    def to_record(self) -> UserRecord:
        """Candidate for the registry — any client-supplied id is dropped."""
        return UserRecord(name=self.name, email=self.email)
