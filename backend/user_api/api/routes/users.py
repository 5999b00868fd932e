"""Users — list and create endpoints for the User resource.

Invariants:
    - POST runs validate_user before touching the registry
    - Field violations → UserValidationError (400), duplicate email → EmailConflictError (409)
    - Responses always carry the registry-assigned id
    - operationId values (getUsers, createUser) are part of the published contract

Design Decisions:
    - Errors raised here and rendered (and logged) by the global handlers: one
      envelope shape and one log line for every failure
    - Registry injected via Depends(get_registry) so tests can swap it
"""

from fastapi import APIRouter, Depends, status

from user_api.core.domain_types import EmailConflict
from user_api.core.errors import (
    EmailConflictError, ErrorContext, UserValidationError,
)
from user_api.core.repository_protocols import UsersApi
from user_api.core.validate_user import validate_user
from user_api.infrastructure.registry import get_registry
from user_api.schemas.user import User

router = APIRouter(prefix="/api/v1/users", tags=["Users"])


@router.get(
    "",
    response_model=list[User],
    operation_id="getUsers",
    summary="Retrieve users",
    description="Get a list of all users",
    responses={
        200: {"description": "Users retrieved successfully"},
        500: {"description": "Internal server error"},
    },
)
async def list_users(registry: UsersApi = Depends(get_registry)):
    return [User.model_validate(u) for u in registry.list_users()]


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    operation_id="createUser",
    summary="Create user",
    description="Create a new user account",
    responses={
        201: {"description": "User created successfully"},
        400: {"description": "Invalid user data"},
        409: {"description": "User with email already exists"},
        500: {"description": "Internal server error"},
    },
)
async def create_user(body: User, registry: UsersApi = Depends(get_registry)):
    violations = validate_user(body)
    if violations:
        raise UserValidationError(violations)

    result = registry.create_user(body.to_record())
    if isinstance(result, EmailConflict):
        raise EmailConflictError(
            result.email, ErrorContext(user_id=result.existing_id),
        )
    return User.model_validate(result)
