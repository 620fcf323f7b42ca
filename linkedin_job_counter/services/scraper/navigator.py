# =============================================================================
# Page Navigator
# =============================================================================
"""
Navigation to a company's LinkedIn jobs page with bounded retries.
"""

import asyncio
import logging

from playwright.async_api import Page

from linkedin_job_counter.config import NavigationSettings, RetrySettings
from linkedin_job_counter.services.scraper.exceptions import NavigationError
from linkedin_job_counter.services.scraper.retry import SleepFunc, retry_async


# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


def build_jobs_url(linkedin_url: str, jobs_path_suffix: str = "jobs/") -> str:
    """
    Turn a company URL into its jobs page URL.

    Args:
        linkedin_url: Company LinkedIn URL, with or without trailing slash.
        jobs_path_suffix: Path appended after the company URL.

    Returns:
        The jobs page URL, e.g. ``.../company/acme/jobs/``.
    """
    if not linkedin_url.endswith("/"):
        linkedin_url += "/"
    return linkedin_url + jobs_path_suffix


async def navigate_with_retry(
    page: Page,
    url: str,
    navigation: NavigationSettings,
    retry: RetrySettings,
    sleep: SleepFunc = asyncio.sleep,
) -> None:
    """
    Navigate the page to a URL, retrying on failure.

    Args:
        page: Page to navigate.
        url: Target URL.
        navigation: Load state and timeout options.
        retry: Attempt budget and fixed delay.
        sleep: Coroutine used to pause between attempts.

    Raises:
        NavigationError: If every attempt failed.
    """

    async def goto() -> None:
        await page.goto(
            url,
            wait_until=navigation.wait_until,
            timeout=navigation.timeout_ms,
        )

    try:
        await retry_async(
            goto,
            max_attempts=retry.max_attempts,
            delay_seconds=retry.delay_ms / 1000,
            description=f"Navigation to {url}",
            sleep=sleep,
        )
    except Exception as e:
        raise NavigationError(url, retry.max_attempts, e) from e

    logger.debug(f"Navigated to {url} (now at {page.url})")
