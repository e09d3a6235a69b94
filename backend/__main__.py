"""
Entry point for running the application with `python -m backend`.
"""
import logging

import uvicorn

from backend.settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    """Configure logging and serve the app on the configured port."""
    from backend.main import configure_logging

    settings = get_settings()
    configure_logging(settings)

    logger.info("Starting workout API on http://localhost:%d", settings.port)
    uvicorn.run(
        "backend.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
