"""
Main entrypoint for the Stockholm Sauna Directory API.

``create_app`` builds and configures the FastAPI application; ``app``
is the instance created at import time for ASGI servers, e.g.::

    uvicorn sauna_directory.app.main:app --reload

On startup the application opens a single row store client from the
settings.  Missing store credentials abort startup.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.dependencies import error_response
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.store import RowStoreClient, create_store_client

logger = logging.getLogger(__name__)


def create_app(config: Optional[Settings] = None, store: Optional[RowStoreClient] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use; defaults to the module-level ``settings``.
    store : Optional[RowStoreClient]
        Pre-built row store client.  When given, the application uses
        it as is and does not close it on shutdown.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or default_settings
    # Initialise logging before anything else so that startup can log.
    setup_logging(config.log_level, config.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if store is not None:
            app.state.store = store
            yield
            return
        # Raises ConfigurationError when the store secrets are missing.
        client = create_store_client(config)
        app.state.store = client
        logger.info("Connected row store client to %s", client.base_url)
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(
        title=config.project_name,
        description=config.description,
        version=config.api_version,
        lifespan=lifespan,
    )
    if store is not None:
        app.state.store = store

    app.include_router(v1_router, prefix="/api")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, "Internal server error", str(exc) or exc.__class__.__name__)

    @app.get("/health", include_in_schema=False)
    async def health() -> dict:
        return {"status": "ok"}

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
