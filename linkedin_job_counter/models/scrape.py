# =============================================================================
# Scrape Models
# =============================================================================
"""
Pydantic models for scrape request and response handling.

Every scrape produces exactly one ScrapeResult, whatever branch it ends in.
``build_result`` is the single place that turns a scrape outcome into that
shape.
"""

from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------
NOT_AVAILABLE = "N/A"

SOURCE_PLAYWRIGHT = "LinkedIn Jobs Page (Playwright)"
SOURCE_LOGIN_REQUIRED = "LinkedIn Jobs Page (Login Required)"
SOURCE_JOBS_PAGE = "LinkedIn Jobs Page"

REASON_LOGIN_WALL = "LinkedIn requires authentication"
REASON_NOT_FOUND = "Job count not found on page"


# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------
class ScrapeOutcome(str, Enum):
    """
    Terminal state of a single scrape.

    Attributes:
        SUCCESS: A job count was extracted.
        LOGIN_WALL: LinkedIn redirected to an authentication page.
        NOT_FOUND: The page loaded but no strategy found a count.
        ERROR: Navigation or extraction failed.
    """

    SUCCESS = "success"
    LOGIN_WALL = "login_wall"
    NOT_FOUND = "not_found"
    ERROR = "error"


# -----------------------------------------------------------------------------
# Request / Response Models
# -----------------------------------------------------------------------------
class ScrapeRequest(BaseModel):
    """
    Request payload for the scrape endpoint.

    Both fields are declared optional so the route can answer a missing
    field with its own 400 payload instead of a validation error. A value
    that is not a string counts as missing.

    Attributes:
        linkedin_url: Company LinkedIn URL (JSON key ``linkedinUrl``).
        company_name: Company display name (JSON key ``companyName``).
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "linkedinUrl": "https://www.linkedin.com/company/acme",
                    "companyName": "Acme"
                }
            ]
        },
    )

    linkedin_url: Optional[str] = Field(
        default=None,
        alias="linkedinUrl",
        description="Company LinkedIn URL"
    )
    company_name: Optional[str] = Field(
        default=None,
        alias="companyName",
        description="Company name"
    )

    @field_validator("linkedin_url", "company_name", mode="before")
    @classmethod
    def drop_non_string(cls, v: Any) -> Optional[str]:
        """
        Treat a non-string value as absent.

        Args:
            v: Raw value from the request body.

        Returns:
            The value if it is a string, otherwise None.
        """
        return v if isinstance(v, str) else None

    @property
    def is_complete(self) -> bool:
        """Both required fields are present and non-empty."""
        return bool(self.linkedin_url and self.company_name)


class ScrapeResult(BaseModel):
    """
    Result of a scrape.

    Attributes:
        company_name: Company name as given in the request.
        openings_count: Number of openings, or "N/A" when unavailable.
        source: Human-readable label of where the count came from.
        url: Jobs page URL (final URL after redirects on success).
        reason: Why no count is available. Absent on success.
        outcome: Terminal state. Not serialized.
    """

    company_name: str = Field(
        description="Company name"
    )
    openings_count: Union[int, Literal["N/A"]] = Field(
        description="Number of job openings or N/A"
    )
    source: str = Field(
        description="Where the count was taken from"
    )
    url: str = Field(
        description="Jobs page URL"
    )
    reason: Optional[str] = Field(
        default=None,
        description="Reason the count is unavailable"
    )
    outcome: ScrapeOutcome = Field(
        exclude=True,
        description="Terminal state of the scrape"
    )

    def to_response(self) -> dict:
        """
        Serialize for the HTTP response, dropping ``reason`` on success.

        Returns:
            JSON-compatible dictionary.
        """
        return self.model_dump(exclude_none=True)


# -----------------------------------------------------------------------------
# Result Mapping
# -----------------------------------------------------------------------------
def build_result(
    outcome: ScrapeOutcome,
    company_name: str,
    url: str,
    count: Optional[int] = None,
    error: Optional[BaseException] = None,
) -> ScrapeResult:
    """
    Map a scrape outcome to the ScrapeResult shape.

    Args:
        outcome: Terminal state of the scrape.
        company_name: Company name from the request.
        url: URL to report (requested or final, depending on outcome).
        count: Extracted job count, required for SUCCESS.
        error: The failure, used for ERROR.

    Returns:
        ScrapeResult carrying exactly the fields of that outcome.

    Raises:
        ValueError: If SUCCESS is requested without a count.
    """
    if outcome is ScrapeOutcome.SUCCESS:
        if count is None:
            raise ValueError("A successful scrape needs a count")
        return ScrapeResult(
            company_name=company_name,
            openings_count=count,
            source=SOURCE_PLAYWRIGHT,
            url=url,
            outcome=outcome,
        )

    if outcome is ScrapeOutcome.LOGIN_WALL:
        source, reason = SOURCE_LOGIN_REQUIRED, REASON_LOGIN_WALL
    elif outcome is ScrapeOutcome.NOT_FOUND:
        source, reason = SOURCE_JOBS_PAGE, REASON_NOT_FOUND
    else:
        source, reason = SOURCE_JOBS_PAGE, f"Error: {error}"

    return ScrapeResult(
        company_name=company_name,
        openings_count=NOT_AVAILABLE,
        source=source,
        url=url,
        reason=reason,
        outcome=outcome,
    )
