"""
Main entrypoint for the Movie Chat API.

This module assembles the FastAPI application, sets up logging,
manages the database lifecycle and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn movie_chat_api.app.main:app --reload

The database handle is opened in the startup hook, passed to the
store, and closed in the shutdown hook.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import open_database
from .core.errors import ChatError, MalformedRequest
from .core.logging_config import setup_logging
from .services.chat_service import ChatService
from .services.store import ChatStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list(),
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.exception_handler(ChatError)
    async def chat_error_handler(request: Request, exc: ChatError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        error = MalformedRequest("; ".join(str(err.get("msg")) for err in exc.errors()) or "Invalid request")
        logger.info("%s %s rejected: %s", request.method, request.url.path, error.message)
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.on_event("startup")
    async def startup_event() -> None:
        db = open_database(settings.database_url, timeout=settings.database_timeout)
        app.state.db = db
        app.state.chat_service = ChatService(ChatStore(db), image_base_url=settings.image_base_url)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        db = getattr(app.state, "db", None)
        if db is not None:
            db.close()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
