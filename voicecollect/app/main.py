"""FastAPI application for the VoiceCollect server."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from sqlmodel import SQLModel

from voicecollect.database.session import engine
from voicecollect.database.settings import settings as db_settings

from .exception_handlers import register_exception_handlers
from .settings import settings

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:     %(name)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Initializes database tables on startup.
    """
    if db_settings.is_sqlite:
        Path(db_settings.sqlite_path).parent.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(engine)
    logger.info(f"Database ready ({db_settings.db_type})")
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="VoiceCollect Server",
        description="Voice sample collection for Sinhala and Tamil speakers",
        version="1.0.0",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Check server health status."""
        return {"status": "healthy", "version": "1.0.0"}

    from .routers.admin import router as admin_router
    from .routers.auth import router as auth_router
    from .routers.recordings import router as recordings_router

    app.include_router(auth_router)
    app.include_router(recordings_router)
    app.include_router(admin_router)

    return app


def run_server() -> None:
    """Run the server using uvicorn."""
    app = create_app()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


# Application instance for ASGI servers
app = create_app()
