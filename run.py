"""Entry point for the Blog API server.

Starts the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``3000``); see ``blog_api/app/core/config.py`` for the remaining
settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from blog_api.app.core.config import settings
from blog_api.app.main import app


async def main() -> None:
    """Serve the API until the process is terminated."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Server stopped")
