"""Boundary Protocols — the contract between the HTTP shell and the user store.

Invariants:
    - Routes depend on UsersApi, never on a concrete store class
    - Both operations are synchronous: the store does no IO

Design Decisions:
    - Protocol over ABC: structural subtyping, UserRegistry needs no base class
    - Hand-authored instead of generated: the contract is two methods, and a
      type checker verifies implementations without runtime reflection
"""

from typing import Protocol

from user_api.core.domain_types import EmailConflict, UserRecord


class UsersApi(Protocol):
    """Contract for user listing and creation — implemented by UserRegistry."""
    def list_users(self) -> list[UserRecord]: ...
    def create_user(
        self, candidate: UserRecord,
    ) -> UserRecord | EmailConflict: ...
    def count(self) -> int: ...
