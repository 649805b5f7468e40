"""
Main entrypoint for the Blog API.

This module assembles the FastAPI application: logging, storage,
CORS, the request body limit, error handlers, the API routers and an
optional static front‑end.  ``create_app`` builds and configures the
app, which is then instantiated at module import time as ``app``::

    uvicorn blog_api.app.main:app --reload

Tests call ``create_app`` with their own ``Settings`` and ``Storage``.
"""

import logging
import os
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .api.router import build_router
from .core.config import Settings, resolve_database_path, settings as default_settings
from .core.db import Storage
from .core.errors import BlogError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if location:
        return f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
    return f"Invalid request: {first.get('msg', 'invalid value')}"


def create_app(config: Optional[Settings] = None, storage: Optional[Storage] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use; defaults to the module‑level ``settings``.
    storage : Optional[Storage]
        Storage handle to serve from.  When omitted a handle is built
        for the path chosen by ``resolve_database_path``.  Either way
        the handle is opened on startup and closed on shutdown.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or default_settings
    setup_logging(config.log_level, config.log_file)

    # Fail fast on a bad ACCOUNT_MODE before anything is opened.
    api_router = build_router(config.account_mode)

    if storage is None:
        storage = Storage(resolve_database_path(config))

    app = FastAPI(title=config.project_name, version=config.api_version)
    app.state.settings = config
    app.state.storage = storage

    @app.middleware("http")
    async def limit_body_size(request: Request, call_next):
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > config.max_body_bytes:
            return JSONResponse(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                content={"message": "Request body too large"},
            )
        return await call_next(request)

    # Outermost, so 413 responses carry CORS headers too.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(BlogError)
    async def blog_error_handler(request: Request, exc: BlogError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _validation_message(exc)},
        )

    app.include_router(api_router, prefix="/api")

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {
            "status": "ok",
            "database": "connected" if storage.is_open else "closed",
        }

    @app.on_event("startup")
    async def startup_event() -> None:
        # Errors here (e.g. an unwritable database path) stop the server.
        logger.info("Using SQLite database at %s", storage.database_path)
        storage.open()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        storage.close()

    # Mounted last so that /api/* and /health take precedence.
    if config.static_dir:
        if os.path.isdir(config.static_dir):
            app.mount("/", StaticFiles(directory=config.static_dir, html=True), name="site")
        else:
            logger.warning("STATIC_DIR %s does not exist; static site disabled", config.static_dir)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
