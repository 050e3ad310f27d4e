"""Run the API locally with uvicorn: ``python -m classroom_qa``."""

import sys

import uvicorn
from loguru import logger

from classroom_qa.config import get_settings
from classroom_qa.main import create_app
from classroom_qa.middleware import configure_logging
from classroom_qa.ports import PortUnavailableError, find_available_port


def main() -> int:
    settings = get_settings()
    configure_logging()

    port = settings.port
    if not settings.is_hosted:
        try:
            port = find_available_port(settings.port, settings.port_search_attempts)
        except PortUnavailableError as exc:
            logger.error(
                "Could not start server",
                error=str(exc),
                hint="Stop the process holding the port or set PORT in .env",
            )
            return 1
        if port != settings.port:
            logger.warning("Using alternative port", requested=settings.port, port=port)

    app = create_app(settings.model_copy(update={"port": port}))
    logger.info("Health check available", url=f"http://localhost:{port}/health")
    uvicorn.run(app, host=settings.host, port=port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
