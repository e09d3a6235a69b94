"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI, Request, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.responses import plain_text_error
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(filename)s:%(lineno)d: %(message)s"
LOG_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Initialize Sentry for error tracking
    _init_sentry(settings)

    # Create FastAPI app
    app = FastAPI(
        title="Workout XP API",
        description="Scores logged workout sets with experience points",
        version="1.0.0",
    )

    # Errors raised by routing (404, 405) go out as plain text
    app.add_exception_handler(StarletteHTTPException, plain_text_http_exception_handler)

    # Include API routers
    _include_routers(app)

    return app


def configure_logging(settings: Settings) -> None:
    """Configure process-wide logging. Call once at startup."""
    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


async def plain_text_http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Render an HTTPException as its detail string in plain text."""
    return plain_text_error(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            profiles_sample_rate=0.1,
            enable_tracing=True,
        )
        logger.info("Sentry initialized for workout-api")


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import workouts_router

    # Workout logging (/log at root)
    app.include_router(workouts_router)


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
