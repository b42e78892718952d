"""FastAPI application for the punch calculator."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from punchcalc import __version__
from punchcalc.api.routers import punch_router, punch_websocket_router, static_router
from punchcalc.api.services.session_manager import get_session_manager
from punchcalc.config import get_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Punch Calculator starting up (static files: %s)", get_config().static_dir)
    yield
    logger.info("Punch Calculator shutting down")
    # Stop any animating sessions
    await get_session_manager().cleanup_all()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Punch Calculator",
        description="Kinetic chain punch visualization API",
        version=__version__,
        lifespan=lifespan,
    )

    # Configure CORS for a separately served frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",  # Vite dev server
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
            "active_sessions": len(get_session_manager().active_sessions),
        }

    app.include_router(punch_router, prefix="/api/v1")
    app.include_router(punch_websocket_router)
    # Catch-all file server goes last so it never shadows the API
    app.include_router(static_router)

    return app


# Create app instance
app = create_app()


def run_api(host: str | None = None, port: int | None = None, reload: bool = False) -> None:
    """Run the API server."""
    config = get_config()
    uvicorn.run(
        "punchcalc.api.main:app",
        host=host or config.host,
        port=port or config.port,
        reload=reload,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    run_api(reload=True)
