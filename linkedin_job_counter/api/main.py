# =============================================================================
# FastAPI Application Entry Point
# =============================================================================
"""
Main FastAPI application for the LinkedIn Job Counter.

This module creates and configures the FastAPI application instance,
including middleware, routes, exception handlers and the shared browser
lifecycle.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from linkedin_job_counter import __version__
from linkedin_job_counter.api.errors import build_error_payload
from linkedin_job_counter.api.routes import health, scrape
from linkedin_job_counter.config import get_settings
from linkedin_job_counter.services.scraper import BrowserManager


# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Lifespan Management
# -----------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifespan events.

    Startup creates the shared browser manager without launching Chromium;
    the first scrape launches it. Shutdown closes the browser if it was
    ever launched.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")

    browser_manager = BrowserManager.from_settings(settings)
    app.state.browser_manager = browser_manager
    logger.info(
        "Browser manager ready (executable: "
        f"{settings.chromium_executable_path or 'bundled'})"
    )

    yield

    # -------------------------------------------------------------------------
    # Shutdown
    # -------------------------------------------------------------------------
    logger.info("Shutting down application...")
    await browser_manager.close()
    logger.info("Browser manager closed")


# -----------------------------------------------------------------------------
# Application Factory
# -----------------------------------------------------------------------------
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="LinkedIn Job Counter API",
        description=(
            "Scrapes the number of open positions from a company's "
            "LinkedIn jobs page using a headless browser."
        ),
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )

    # -------------------------------------------------------------------------
    # Middleware Configuration
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        """
        Global exception handler for unhandled exceptions.

        Args:
            request: The incoming request.
            exc: The unhandled exception.

        Returns:
            JSON response with error details.
        """
        logger.error(f"Unhandled exception: {exc}", exc_info=True)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_error_payload(exc, include_stack=not settings.is_production)
        )

    # -------------------------------------------------------------------------
    # Route Registration
    # -------------------------------------------------------------------------
    app.include_router(health.router)
    app.include_router(scrape.router)

    return app


# -----------------------------------------------------------------------------
# Application Instance
# -----------------------------------------------------------------------------
app = create_app()


# -----------------------------------------------------------------------------
# Development Server Entry Point
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "linkedin_job_counter.api.main:app",
        host=settings.api_host,
        port=settings.port,
        reload=settings.debug
    )
