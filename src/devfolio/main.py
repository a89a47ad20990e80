"""FastAPI application entry point.

This module creates and configures the FastAPI application for devfolio.
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from devfolio.api import api_router
from devfolio.core.cache import SnapshotCache, get_snapshot_cache
from devfolio.core.config import (
    AppSettings,
    get_app_settings,
    warn_missing_github_config,
)
from devfolio.core.stats import close_stats_aggregator
from devfolio.utils import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Handles startup and shutdown events.
    """
    settings = get_app_settings()

    # Setup logging
    setup_logging(level=settings.log_level, log_file=settings.log_file)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Debug mode: {settings.debug}")

    # Missing GitHub config is reported but never blocks startup
    warn_missing_github_config(settings)

    yield

    # Cleanup
    logger.info("Shutting down...")
    await close_stats_aggregator()
    logger.info("Shutdown complete")


def _resolve_frontend_dist(configured: str | None) -> Path:
    if configured:
        return Path(configured)
    return Path(__file__).parent.parent.parent / "frontend" / "dist"


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_app_settings()

    app = FastAPI(
        title="devfolio API",
        description="Portfolio backend serving GitHub profile statistics",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # Allow local frontend dev servers on any port
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Include API routes
    app.include_router(api_router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    async def health_check(
        current: AppSettings = Depends(get_app_settings),  # noqa: B008
        cache: SnapshotCache = Depends(get_snapshot_cache),  # noqa: B008
    ):
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": current.app_version,
            "github_token_configured": bool(current.github_token),
            "github_username": current.github_username,
            "cached_snapshots": len(cache),
        }

    frontend_dist = _resolve_frontend_dist(settings.frontend_dist)

    if frontend_dist.exists():
        assets_dir = frontend_dist / "assets"
        if assets_dir.is_dir():
            app.mount("/assets", StaticFiles(directory=str(assets_dir)), name="assets")

        # SPA routing: every non-API path falls back to index.html
        @app.get("/{full_path:path}")
        async def serve_spa(request: Request, full_path: str):
            """Serve the SPA for all routes not matched by API or static files."""
            requested_file = (frontend_dist / full_path).resolve()
            if (
                requested_file.is_file()
                and frontend_dist.resolve() in requested_file.parents
            ):
                return FileResponse(requested_file)

            return FileResponse(frontend_dist / "index.html")

        logger.info(f"Serving frontend static files from: {frontend_dist}")
    else:
        logger.warning(
            f"Frontend dist directory not found at {frontend_dist}. Static file serving disabled."
        )

        @app.get("/")
        async def root():
            """Root endpoint with API information."""
            return {
                "name": settings.app_name,
                "version": settings.app_version,
                "docs": "/docs" if settings.debug else "Disabled in production",
                "health": "/health",
                "api": "/api",
            }

    return app


# Create application instance
app = create_app()


def run():
    """Run the application using uvicorn.

    This function is called when running `devfolio` command.
    """
    import uvicorn

    settings = get_app_settings()
    uvicorn.run(
        "devfolio.main:app",
        host="0.0.0.0",
        port=settings.api_port,
        reload=settings.debug,
        reload_dirs=["src"],
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
