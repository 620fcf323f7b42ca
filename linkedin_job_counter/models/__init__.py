# =============================================================================
# Models Package
# =============================================================================
"""
Pydantic models and API schemas for the LinkedIn Job Counter.

Usage:
    from linkedin_job_counter.models import ScrapeRequest, ScrapeResult
"""

from linkedin_job_counter.models.scrape import (
    NOT_AVAILABLE,
    ScrapeOutcome,
    ScrapeRequest,
    ScrapeResult,
    build_result,
)

__all__ = [
    "NOT_AVAILABLE",
    "ScrapeOutcome",
    "ScrapeRequest",
    "ScrapeResult",
    "build_result",
]
