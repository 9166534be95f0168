"""
TaskFlow API Server

Entry point for the FastAPI application.
"""

import asyncio
from datetime import datetime, timezone

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import __version__
from app.core.config import get_settings
from app.core.database import check_db_connection, dispose_engine
from app.core.logging import configure_logging
from taskflow_shared.schemas.common import DbStatus
from taskflow_shared.schemas.system import HealthRead, WelcomeRead

settings = get_settings()
log = structlog.get_logger()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title="TaskFlow API",
        description="Workspaces, tasks and comments for small teams.",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Startup connection test runs in the background; keep a handle so it
    # is not garbage collected mid-flight.
    background: set[asyncio.Task] = set()

    @app.get("/", response_model=WelcomeRead, tags=["System"])
    async def root():
        """Static welcome message."""
        return WelcomeRead()

    @app.get("/health", response_model=HealthRead, tags=["System"])
    async def health_check():
        """Liveness probe. Always 200; `db` reports database reachability."""
        connected = await check_db_connection()
        return HealthRead(
            timestamp=datetime.now(timezone.utc),
            db=DbStatus.from_bool(connected),
        )

    @app.on_event("startup")
    async def on_startup():
        log.info("server.starting", url=f"http://localhost:{settings.port}", version=__version__)
        task = asyncio.create_task(check_db_connection())
        background.add(task)
        task.add_done_callback(background.discard)

    @app.on_event("shutdown")
    async def on_shutdown():
        log.info("server.shutting_down")
        await dispose_engine()

    return app


app = create_app()


def run() -> None:
    """CLI entry point: serve the API on settings.host:settings.port."""
    uvicorn.run(app, host=settings.host, port=settings.port)
