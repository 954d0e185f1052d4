"""Run the record service with uvicorn."""

import logging

import uvicorn

from record_service.api.app import create_app
from record_service.config import Settings
from record_service.containers import build_container

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve the API on the configured host and port."""
    settings = Settings()
    app = create_app(build_container(settings))
    logger.info("Server is running on http://localhost:%s", settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
