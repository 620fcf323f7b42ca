# =============================================================================
# Health Check Routes
# =============================================================================
"""
Health check endpoints for monitoring and container orchestration.
"""

from datetime import datetime, timezone
from typing import Annotated, Literal

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from linkedin_job_counter import __version__
from linkedin_job_counter.api.routes.scrape import get_browser_manager
from linkedin_job_counter.config import Settings, get_settings
from linkedin_job_counter.services.scraper import BrowserManager


# -----------------------------------------------------------------------------
# Router Setup
# -----------------------------------------------------------------------------
router = APIRouter(prefix="/health", tags=["Health"])


# -----------------------------------------------------------------------------
# Response Models
# -----------------------------------------------------------------------------
class HealthStatus(BaseModel):
    """
    Health check response model.

    Attributes:
        status: Always "ok" while the process is serving requests.
    """

    status: Literal["ok"] = Field(
        default="ok",
        description="Current health status"
    )


class DetailedHealthStatus(HealthStatus):
    """
    Detailed health check with component status.

    Attributes:
        timestamp: Time of the health check.
        version: Application version.
        environment: Current environment (development, staging, production).
        components: Status of individual system components.
    """

    timestamp: datetime = Field(
        description="Time of the health check"
    )
    version: str = Field(
        description="Application version"
    )
    environment: str = Field(
        description="Current environment"
    )
    components: dict[str, dict] = Field(
        description="Status of individual components"
    )


# -----------------------------------------------------------------------------
# Endpoints
# -----------------------------------------------------------------------------
@router.get(
    "",
    response_model=HealthStatus,
    summary="Basic Health Check",
    description="Returns basic health status for container orchestration."
)
async def health_check() -> HealthStatus:
    """
    Perform a basic health check.

    Used by Docker health checks and load balancers to verify the service
    is running. Never touches the browser.

    Returns:
        HealthStatus: ``{"status": "ok"}``.
    """
    return HealthStatus()


@router.get(
    "/detailed",
    response_model=DetailedHealthStatus,
    summary="Detailed Health Check",
    description="Returns health status including the shared browser state."
)
async def detailed_health_check(
    settings: Annotated[Settings, Depends(get_settings)],
    browser_manager: Annotated[BrowserManager, Depends(get_browser_manager)],
) -> DetailedHealthStatus:
    """
    Perform a detailed health check with component status.

    The browser is launched lazily, so "not_started" is a healthy state.

    Returns:
        DetailedHealthStatus: Health status with component info.
    """
    components = {
        "api": {
            "status": "ok"
        },
        "browser": {
            "status": "running" if browser_manager.is_running else "not_started",
            "executable_path": settings.chromium_executable_path or "bundled",
        },
    }

    return DetailedHealthStatus(
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        environment=settings.app_env,
        components=components
    )
