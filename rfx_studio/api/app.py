"""FastAPI application factory."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rfx_studio import __version__
from rfx_studio.api.routes import router
from rfx_studio.config import get_settings
from rfx_studio.utils.logging import get_logger, setup_logging


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings = get_settings()
    logger.info("Starting RFx Studio API", store=str(settings.store_path))
    yield
    logger.info("Shutting down RFx Studio API")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application.
    """
    settings = get_settings()
    setup_logging(settings.log_level, json_format=settings.json_logs or settings.is_production)

    app = FastAPI(
        title="RFx Studio API",
        description="Heuristic RFx analysis and response drafting",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": "RFx Studio API",
            "version": __version__,
            "docs": "/docs",
        }

    return app
