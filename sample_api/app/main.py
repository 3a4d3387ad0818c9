"""
Main entrypoint for the Sample Orders API.

This module assembles the FastAPI application: it sets up logging,
mounts the versioned routers, creates the order table on startup and
installs a last‑resort exception handler.  The app is instantiated at
import time as ``app`` so it can be served directly, e.g.::

    uvicorn sample_api.app.main:app --reload

Interactive documentation (``/docs``) is only served when ``DEBUG`` is
enabled.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured application instance ready to be served.
    """
    # Configure logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None, trace_sql=settings.debug)

    docs_url = "/docs" if settings.debug else None
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        docs_url=docs_url,
        redoc_url=None,
    )

    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        init_db()

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logging.getLogger(__name__).error(
            "An unexpected error occurred while handling %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": UNEXPECTED_ERROR_MESSAGE},
        )

    return app


app = create_app()
