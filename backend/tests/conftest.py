"""Root conftest — shared test configuration."""

import os

# Keep test output readable; settings are cached, so set before any import of user_api.config
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")
