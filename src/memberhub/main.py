# src/memberhub/main.py
"""Main entry point for the memberhub application."""

from __future__ import annotations

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from memberhub.api.handlers import register_exception_handlers
from memberhub.api.v1 import api_v1
from memberhub.core.logging_config import configure_logging
from memberhub.core.settings import Settings, get_settings
from memberhub.core.tokens import TokenCodec
from memberhub.db.session import create_db_engine, create_session_factory

logger = logging.getLogger(__name__)

DESCRIPTION = "Community membership service with role-based authorization"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings
    logger.info(
        "Starting %s %s on port %d (%s database)",
        settings.app_name,
        settings.app_version,
        settings.port,
        settings.database_dialect,
    )
    yield
    app.state.engine.dispose()
    logger.info("Shut down %s", settings.app_name)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application around one immutable settings object."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="memberhub API",
        description=DESCRIPTION,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = create_db_engine(settings)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.token_codec = TokenCodec.from_settings(settings)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)
    app.include_router(api_v1, prefix="/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint to verify the service is running."""
        return {"status": "ok"}

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint with basic information about the API."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "description": DESCRIPTION,
            "docs": "/docs",
            "redoc": "/redoc",
        }

    return app


def run() -> None:
    """Load configuration and serve the API; exit before binding if it is incomplete."""
    configure_logging()
    try:
        settings = get_settings()
    except ValidationError as exc:
        # Report field names only; input values may include secrets.
        fields = sorted({".".join(str(part) for part in err["loc"]) for err in exc.errors()})
        logger.critical("Invalid or missing configuration: %s", ", ".join(fields))
        sys.exit(1)

    import uvicorn

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
