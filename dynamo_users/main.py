"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (users, health, index page)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- The DynamoDB repository and table creation at startup

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from dynamo_users.core.config import Settings, settings as default_settings
from dynamo_users.domain.users.errors import UserStoreError
from dynamo_users.domain.users.ports import UserRepository
from dynamo_users.infrastructure.dynamodb.client import build_dynamodb_client
from dynamo_users.infrastructure.dynamodb.user_repository import DynamoUserRepository
from dynamo_users.interfaces.health import router as health_router
from dynamo_users.interfaces.users.router import router as users_router
from dynamo_users.interfaces.web import router as web_router
from dynamo_users.shared.errors.handlers import register_error_handlers
from dynamo_users.shared.logging import configure_logging
from dynamo_users.shared.security.headers import SecurityHeadersMiddleware
from dynamo_users.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


def build_user_repository(settings: Settings) -> DynamoUserRepository:
    """Build the DynamoDB repository for the configured backend and table."""
    client = build_dynamodb_client(settings)
    return DynamoUserRepository(client=client, table_name=settings.dynamo_table)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: make sure the users table exists."""
    app_settings: Settings = app.state.settings
    if app_settings.create_table_on_startup:
        try:
            app.state.user_repository.ensure_schema()
        except UserStoreError:
            # The API still starts; store calls will report their own errors.
            logger.warning(
                "Could not ensure table %s at startup",
                app_settings.dynamo_table,
                exc_info=True,
            )
    logger.info("Users API ready (env=%s)", app_settings.env)

    yield

    logger.info("Users API stopped")


def create_app(
    settings: Optional[Settings] = None,
    user_repository: Optional[UserRepository] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        settings: Configuration to use. Defaults to the environment settings.
        user_repository: Repository to use. Defaults to a DynamoDB repository
            built from ``settings``.

    Returns:
        A fully configured FastAPI application instance.
    """
    if settings is None:
        settings = default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    if user_repository is None:
        user_repository = build_user_repository(settings)
    app.state.user_repository = user_repository

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings.rate_limit_default)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(web_router)
    app.include_router(health_router)
    app.include_router(users_router)

    return app


app = create_app()
