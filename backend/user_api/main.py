"""User Management API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UserApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - User registry initialized on startup via lifespan context manager
    - OpenAPI document exposes a single `User` component for input and output

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - separate_input_output_schemas=False: the contract has one User schema with a
      read-only id, not User-Input/User-Output pairs
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_api.api.error_handlers import register_error_handlers
from user_api.api.routes import health, users
from user_api.config import get_settings
from user_api.infrastructure.observability import setup_logging
from user_api.infrastructure.registry import init_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_registry()
    logger.info("User Management API started")
    yield
    logger.info("User Management API shutting down")


settings = get_settings()

app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version,
    servers=[{
        "url": settings.api_server_url,
        "description": "Local development server",
    }],
    separate_input_output_schemas=False,
    lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(users.router)

register_error_handlers(app)
