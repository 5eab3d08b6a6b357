# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Person API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Startup order (lifespan):
#   1. Create the database engine (connection pool)
#   2. Run pending schema migrations
#   3. Build the ServiceBundle onto app.state
# Shutdown disposes the engine after in-flight requests finish.
#
# Usage:
#   person-api                       # reads settings from the environment
#   python -m app
#   uvicorn --factory app.main:create_app
# =============================================================================

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app.config import Settings, get_settings
from app.exceptions import (
    PersonApiException,
    person_api_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.logging_config import configure_logging
from app.middleware import RequestLoggingMiddleware
from app.routers import health, persons
from core.database import create_engine
from core.migrations import run_migrations
from core.services import ServiceBundle

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Explicit settings; loaded from the environment when omitted

    Returns:
        A configured app whose lifespan owns the database engine
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        Runs on startup and shutdown:
        - Startup: Create the engine, migrate the schema, build services
        - Shutdown: Dispose the engine and its pooled connections
        """
        # Startup
        logger.info(f"Starting Person API in {settings.ENVIRONMENT} mode")
        engine = create_engine(settings)

        try:
            logger.info("Executing database migration")
            version = await run_migrations(engine, settings.SQLITE_MIGRATIONS_DIR)
            logger.info(f"Schema at version {version}")

            app.state.bundle = ServiceBundle.from_engine(engine)
            logger.info(
                f"Serving on http://{settings.HTTP_SERVER_HOST}:{settings.HTTP_SERVER_PORT}"
            )

            yield
        finally:
            # Shutdown
            logger.info("Shutting down Person API")
            app.state.bundle = None
            logger.info("Closing database connections")
            await engine.dispose()

    app = FastAPI(
        title="Person API",
        description="CRUD API over a single person entity backed by SQLite.",
        version=API_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Persons",
                "description": "Create, read, update and delete persons",
            },
            {
                "name": "Health",
                "description": "Liveness and readiness checks",
            },
        ],
    )
    app.state.settings = settings
    app.state.bundle = None

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    app.add_middleware(RequestLoggingMiddleware)

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    app.add_exception_handler(PersonApiException, person_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    app.include_router(
        persons.router,
        prefix="/api/v1/person",
        tags=["Persons"]
    )

    app.include_router(
        health.router,
        tags=["Health"]
    )

    return app


def run() -> None:
    """
    Console entry point: load settings, configure logging and serve.

    Missing or invalid required settings are fatal (exit status 1).
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.critical(f"Invalid configuration, refusing to start:\n{e}")
        sys.exit(1)

    configure_logging(settings)

    uvicorn.run(
        create_app(settings),
        host=settings.HTTP_SERVER_HOST,
        port=settings.HTTP_SERVER_PORT,
        log_config=None,
        timeout_graceful_shutdown=settings.SHUTDOWN_TIMEOUT_SECONDS,
    )


if __name__ == "__main__":
    run()
