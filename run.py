"""Entry point for the Filmorate API server.

Starts the FastAPI application with Uvicorn.  Host, port and log level
are taken from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``);
see ``filmorate_api/app/core/config.py`` for all supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from filmorate_api.app.core.config import settings
from filmorate_api.app.main import app


async def main() -> None:
    """Serve the application until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    try:
        await server.serve()
    except Exception:
        logging.exception("Server stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
