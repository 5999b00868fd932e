"""Registry Provider — process-wide UserRegistry singleton and its FastAPI dependency.

Invariants:
    - Exactly one registry per process, created on startup by init_registry()
    - get_registry() raises RegistryNotInitializedError before startup
    - Users live as long as the process (no persistence)

Design Decisions:
    - Singleton initialized in lifespan, not at import: no global import side effects
    - Dependency function over direct import in routes: tests swap the registry
      via app.dependency_overrides
"""

import logging

from user_api.core.errors import RegistryNotInitializedError
from user_api.core.repository_protocols import UsersApi
from user_api.core.user_registry import UserRegistry

logger = logging.getLogger(__name__)

# Singleton (initialized on startup)
user_registry: UserRegistry | None = None


def init_registry() -> UserRegistry:
    global user_registry
    if user_registry is None:
        user_registry = UserRegistry()
        logger.info("User registry initialized")
    return user_registry


def get_registry() -> UsersApi:
    """FastAPI dependency for the user registry."""
    if user_registry is None:
        raise RegistryNotInitializedError()
    return user_registry
