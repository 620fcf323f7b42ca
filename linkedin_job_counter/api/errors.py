# =============================================================================
# Error Responses
# =============================================================================
"""
Error payloads shared by the scrape route and the global exception handler.
"""

import traceback
from typing import Optional

from pydantic import BaseModel, Field


REQUIRED_SCRAPE_FIELDS = ["linkedinUrl", "companyName"]


class ErrorResponse(BaseModel):
    """
    Error response body.

    Attributes:
        error: Error message.
        stack: Traceback, only outside production.
    """

    error: str = Field(
        description="Error message"
    )
    stack: Optional[str] = Field(
        default=None,
        description="Traceback (non-production only)"
    )


class MissingParametersResponse(BaseModel):
    """
    Body returned when required scrape fields are missing.

    Attributes:
        error: Fixed error message.
        required: Names of the required fields.
    """

    error: str = Field(
        default="Missing required parameters",
        description="Error message"
    )
    required: list[str] = Field(
        default_factory=lambda: list(REQUIRED_SCRAPE_FIELDS),
        description="Required request fields"
    )


def build_error_payload(exc: BaseException, include_stack: bool) -> dict:
    """
    Build the 500 response body for an unexpected exception.

    Args:
        exc: The exception.
        include_stack: Attach the formatted traceback.

    Returns:
        JSON-compatible dictionary with ``error`` and optionally ``stack``.
    """
    stack = None
    if include_stack:
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    return ErrorResponse(error=str(exc), stack=stack).model_dump(exclude_none=True)
