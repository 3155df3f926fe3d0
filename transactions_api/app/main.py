"""
Main entrypoint for the Product Transactions API.

This module assembles the FastAPI application: it sets up logging,
installs CORS and the JSON error handlers, includes the routers and
registers the startup hook that opens the SQLite store and seeds it
from the remote dataset.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``::

    uvicorn transactions_api.app.main:app --port 4005
"""

import asyncio
import logging

from fastapi import FastAPI, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router
from .core.config import settings
from .core.db import ProductStore, get_database_path
from .core.logging_config import setup_logging
from .services.seed_service import SeedService

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": message}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error"},
        )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  The store is not
        opened until the startup hook runs.
    """
    # Initialise logging before anything else so that the startup hook
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        db_path = get_database_path()
        store = ProductStore.open(db_path)
        store.init_db()
        app.state.store = store
        logger.info("Database ready at %s", db_path)
        app.state.seed_task = None
        if settings.seed_on_startup:
            # The download runs in a worker thread so requests are served
            # from the data already stored while seeding is in progress.
            app.state.seed_task = asyncio.create_task(
                run_in_threadpool(
                    SeedService.seed_products, store, settings.seed_url, timeout=settings.seed_timeout
                )
            )

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        seed_task = getattr(app.state, "seed_task", None)
        if seed_task is not None:
            # The seeding thread cannot be interrupted; wait for it before
            # closing the connection it writes to.
            for result in await asyncio.gather(seed_task, return_exceptions=True):
                if isinstance(result, Exception):
                    logger.error("Seeding failed: %s", result)
        store = getattr(app.state, "store", None)
        if store is not None:
            store.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
