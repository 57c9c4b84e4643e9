"""devgate API — FastAPI application factory and entry point.

Invariants:
    - Composition order: authentication installed, /dev exemption registered, CORS,
      routes built (dev route first), error handlers
    - The /dev exemption is registered only when the dev endpoint is enabled, and
      create_app fails with StartupError if the authenticator is missing
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - create_app(settings) factory so tests can build apps with other settings;
      module-level `app` uses get_settings() for uvicorn
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from devgate.api.error_handlers import register_error_handlers
from devgate.api.middleware import (
    AuthenticatorConfig, install_authentication, register_exemption,
)
from devgate.api.routes import authn, health, roles, secrets
from devgate.api.routes.dev import DEV_PATH_PATTERN
from devgate.api.routes.registry import rebuild_route_table
from devgate.config import Settings, get_settings
from devgate.infrastructure.database import init_db
from devgate.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await manager.create_schema()
    if settings.dev_endpoint_enabled:
        logger.warning("Dev endpoint enabled: /dev bypasses authentication")
    logger.info("devgate API started")
    yield
    await manager.dispose()
    logger.info("devgate API shutting down")


def application_routers() -> list[APIRouter]:
    return [health.router, authn.router, secrets.router, roles.router]


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="devgate API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    install_authentication(
        app, AuthenticatorConfig.from_patterns(settings.auth_bypass_patterns),
    )
    if settings.dev_endpoint_enabled:
        register_exemption(app, DEV_PATH_PATTERN)

    # Added after authentication so preflight requests are answered first
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    rebuild_route_table(
        app, application_routers(), include_dev=settings.dev_endpoint_enabled,
    )
    register_error_handlers(app)
    return app


app = create_app()
