"""
Process entry point: serve the API with uvicorn.

uvicorn handles SIGINT/SIGTERM; in-flight requests get ``SHUTDOWN_TIMEOUT``
seconds before the process exits, after which the lifespan closes the
database connections.
"""
import uvicorn

from taskapi.infra.config import Settings
from taskapi.infra.logging_config import get_logger

from .main import create_app

logger = get_logger("server")


def run() -> None:
    settings = Settings()
    app = create_app(settings)

    logger.info(
        "Server starting",
        extra={"host": settings.host, "port": settings.port, "environment": settings.environment},
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_graceful_shutdown=settings.shutdown_timeout,
        log_config=None,
    )


if __name__ == "__main__":
    run()
