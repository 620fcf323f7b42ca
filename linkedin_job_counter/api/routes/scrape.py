# =============================================================================
# Scrape Routes
# =============================================================================
"""
Endpoint that scrapes a company's LinkedIn job count.

Login walls and missing counts are reported as 200 responses with a
``reason``; only unexpected failures outside the scraper produce a 500.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from linkedin_job_counter.api.errors import (
    ErrorResponse,
    MissingParametersResponse,
    build_error_payload,
)
from linkedin_job_counter.config import Settings, get_settings
from linkedin_job_counter.models.scrape import ScrapeRequest, ScrapeResult
from linkedin_job_counter.services.scraper import BrowserManager, LinkedInJobScraper


# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Router Setup
# -----------------------------------------------------------------------------
router = APIRouter(tags=["Scrape"])


# -----------------------------------------------------------------------------
# Dependencies
# -----------------------------------------------------------------------------
def get_browser_manager(request: Request) -> BrowserManager:
    """
    Dependency to get the shared browser manager.

    Args:
        request: The incoming request.

    Returns:
        BrowserManager created during application startup.
    """
    return request.app.state.browser_manager


def get_scraper(
    browser_manager: Annotated[BrowserManager, Depends(get_browser_manager)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> LinkedInJobScraper:
    """
    Dependency to get a scraper bound to the shared browser.

    Args:
        browser_manager: Shared browser manager.
        settings: Application settings.

    Returns:
        LinkedInJobScraper configured with current settings.
    """
    return LinkedInJobScraper.from_settings(browser_manager, settings)


# -----------------------------------------------------------------------------
# Endpoints
# -----------------------------------------------------------------------------
@router.post(
    "/scrape",
    responses={
        200: {"model": ScrapeResult, "description": "Scrape outcome"},
        400: {"model": MissingParametersResponse, "description": "Missing parameters"},
        500: {"model": ErrorResponse, "description": "Unexpected error"},
    },
    summary="Scrape LinkedIn Job Count",
    description="Open a company's LinkedIn jobs page and report its job count.",
)
async def scrape(
    scraper: Annotated[LinkedInJobScraper, Depends(get_scraper)],
    settings: Annotated[Settings, Depends(get_settings)],
    payload: Optional[ScrapeRequest] = None,
) -> JSONResponse:
    """
    Scrape the job count for the requested company.

    Args:
        scraper: Scraper bound to the shared browser.
        settings: Application settings.
        payload: Request body with ``linkedinUrl`` and ``companyName``.

    Returns:
        200 with a ScrapeResult, 400 if a field is missing, 500 on an
        unexpected error.
    """
    logger.info(f"Received scrape request: {payload.model_dump(by_alias=True) if payload else None}")

    if payload is None or not payload.is_complete:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=MissingParametersResponse().model_dump(),
        )

    try:
        result = await scraper.scrape(payload.linkedin_url, payload.company_name)
    except Exception as e:
        logger.error(f"Scraping error: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_error_payload(e, include_stack=not settings.is_production),
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=result.to_response())
