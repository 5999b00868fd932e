"""User Registry — in-memory, thread-safe store of accepted users.

Invariants:
    - Every stored user has a unique id, assigned from a monotonic counter starting at 1
    - No two stored users share an email (case-sensitive exact match)
    - Uniqueness check, id assignment and append run under ONE lock acquisition
    - list_users() returns a new list — callers never hold a reference to storage
    - Format is NOT re-validated here: the boundary runs validate_user first

Design Decisions:
    - threading.Lock over an async lock: FastAPI may run handlers in its threadpool,
      and no operation here awaits, so a plain mutex covers both cases
    - Frozen UserRecord: snapshot list copies are enough for full independence
    - Counter instead of len(storage) + 1: stays correct if removal is ever added
    - EmailConflict returned, not raised: a duplicate is an expected outcome,
      logged once by the API error handler rather than here
"""

import logging
import threading
from dataclasses import replace

from user_api.core.domain_types import EmailConflict, UserId, UserRecord

logger = logging.getLogger(__name__)


class UserRegistry:
    """Owns the authoritative list of users. Only create_user mutates it."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: list[UserRecord] = []
        self._emails: dict[str, UserId] = {}
        self._last_id = 0

    def list_users(self) -> list[UserRecord]:
        """Snapshot of all users in insertion order."""
        with self._lock:
            return list(self._users)

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def create_user(self, candidate: UserRecord) -> UserRecord | EmailConflict:
        """Store candidate under a fresh id, or report the email as taken.

        Any id already set on candidate is ignored.
        """
        with self._lock:
            existing_id = self._emails.get(candidate.email)
            if existing_id is not None:
                return EmailConflict(
                    email=candidate.email, existing_id=existing_id,
                )
            self._last_id += 1
            user = replace(candidate, id=UserId(self._last_id))
            self._users.append(user)
            self._emails[user.email] = user.id
        logger.info("User created", extra={"user_id": user.id})
        return user
