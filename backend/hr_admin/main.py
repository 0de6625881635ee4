"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hr_admin.application.services import ConsoleWorkspace
from hr_admin.config import get_settings
from hr_admin.infrastructure.dependencies import build_workspace
from hr_admin.infrastructure.logging.log_config import setup_logging
from hr_admin.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and share one backend HTTP client."""
    settings = get_settings()
    setup_logging(settings)

    http_client: httpx.AsyncClient | None = None
    if getattr(app.state, "workspace", None) is None:
        if settings.http_timeout_seconds is None:
            http_client = httpx.AsyncClient()
        else:
            http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
        app.state.workspace = build_workspace(settings, http_client)
        logger.info("Console workspace ready — backend at %s", settings.api_base_url)

    yield

    # Shutdown
    if http_client is not None:
        await http_client.aclose()


def create_app(workspace: ConsoleWorkspace | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    A prebuilt ``workspace`` replaces the one assembled at startup.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.workspace = workspace

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hr_admin.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
