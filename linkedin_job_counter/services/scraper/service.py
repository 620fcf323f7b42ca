# =============================================================================
# LinkedIn Job Scraper Service
# =============================================================================
"""
Scrape orchestration: one request in, one ScrapeResult out.

Flow per request:
    Init -> Navigating -> LoginWallCheck -> Extracting -> Done

Any failure after the browsing context exists (navigation retries
exhausted, page errors, extraction errors) becomes an ERROR result.
Failure to create the context itself propagates to the caller. The context
is closed exactly once on every path.

Usage:
    from linkedin_job_counter.services.scraper import BrowserManager, LinkedInJobScraper

    manager = BrowserManager.from_settings(settings)
    scraper = LinkedInJobScraper.from_settings(manager, settings)
    result = await scraper.scrape("https://www.linkedin.com/company/acme", "Acme")
"""

import asyncio
import logging
from typing import Optional, Sequence

from playwright.async_api import BrowserContext

from linkedin_job_counter.config import (
    ExtractionSettings,
    NavigationSettings,
    RetrySettings,
    SelectorSettings,
    Settings,
)
from linkedin_job_counter.models.scrape import ScrapeOutcome, ScrapeResult, build_result
from linkedin_job_counter.services.scraper.browser import BrowserManager
from linkedin_job_counter.services.scraper.detection import is_login_wall
from linkedin_job_counter.services.scraper.extractors import (
    ExtractionStrategy,
    PageSnapshot,
    build_strategies,
    extract_job_count,
)
from linkedin_job_counter.services.scraper.navigator import (
    build_jobs_url,
    navigate_with_retry,
)
from linkedin_job_counter.services.scraper.retry import SleepFunc


# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Job Scraper Service Class
# -----------------------------------------------------------------------------
class LinkedInJobScraper:
    """
    Scrapes the number of open jobs from a company's LinkedIn jobs page.

    Attributes:
        browser_manager: Source of browsing contexts.
        navigation: Load state, timeout and jobs path options.
        retry: Navigation retry policy.
        selectors: CSS selectors for detection and extraction.
        extraction: Text, JSON and URL patterns.
        strategies: Extraction cascade, in evaluation order.
    """

    def __init__(
        self,
        browser_manager: BrowserManager,
        navigation: NavigationSettings,
        retry: RetrySettings,
        selectors: SelectorSettings,
        extraction: ExtractionSettings,
        strategies: Optional[Sequence[ExtractionStrategy]] = None,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        """
        Initialize the scraper.

        Args:
            browser_manager: Source of browsing contexts.
            navigation: Load state, timeout and jobs path options.
            retry: Navigation retry policy.
            selectors: CSS selectors for detection and extraction.
            extraction: Text, JSON and URL patterns.
            strategies: Custom extraction cascade. Built from selectors and
                extraction settings when omitted.
            sleep: Coroutine used to pause between navigation attempts.
        """
        self.browser_manager = browser_manager
        self.navigation = navigation
        self.retry = retry
        self.selectors = selectors
        self.extraction = extraction
        self.strategies = (
            list(strategies)
            if strategies is not None
            else build_strategies(selectors, extraction)
        )
        self._sleep = sleep

    @classmethod
    def from_settings(
        cls, browser_manager: BrowserManager, settings: Settings
    ) -> "LinkedInJobScraper":
        """
        Create a scraper from application settings.

        Args:
            browser_manager: Shared browser manager.
            settings: Application settings.

        Returns:
            Configured LinkedInJobScraper.
        """
        return cls(
            browser_manager=browser_manager,
            navigation=settings.navigation,
            retry=settings.retry,
            selectors=settings.selectors,
            extraction=settings.extraction,
        )

    # -------------------------------------------------------------------------
    # Public Methods
    # -------------------------------------------------------------------------
    async def scrape(self, linkedin_url: str, company_name: str) -> ScrapeResult:
        """
        Scrape the job count for a company.

        Args:
            linkedin_url: Company LinkedIn URL.
            company_name: Company name echoed in the result.

        Returns:
            ScrapeResult for exactly one of success, login wall, not found
            or error.

        Raises:
            Exception: If a browsing context cannot be created.
        """
        jobs_url = build_jobs_url(linkedin_url, self.navigation.jobs_path_suffix)
        logger.info(f"Scraping LinkedIn jobs for {company_name} at {jobs_url}")

        context = await self.browser_manager.new_context()

        try:
            result = await self._scrape_in_context(context, jobs_url, company_name)
        except Exception as e:
            logger.error(f"Error scraping LinkedIn for {company_name}: {e}", exc_info=True)
            result = build_result(
                ScrapeOutcome.ERROR,
                company_name=company_name,
                url=jobs_url,
                error=e,
            )
        finally:
            await context.close()

        logger.info(
            f"Scrape for {company_name} finished: {result.outcome.value} "
            f"(openings_count={result.openings_count})"
        )
        return result

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------
    async def _scrape_in_context(
        self,
        context: BrowserContext,
        jobs_url: str,
        company_name: str,
    ) -> ScrapeResult:
        """
        Navigate, check for a login wall and extract within one context.

        Args:
            context: Browsing context owned by this request.
            jobs_url: Jobs page URL.
            company_name: Company name echoed in the result.

        Returns:
            ScrapeResult for success, login wall or not found.
        """
        page = await context.new_page()
        page.set_default_timeout(self.navigation.timeout_ms)

        # ---------------------------------------------------------------------
        # Navigate
        # ---------------------------------------------------------------------
        await navigate_with_retry(
            page, jobs_url, self.navigation, self.retry, sleep=self._sleep
        )
        await page.wait_for_load_state("domcontentloaded")
        snapshot = await PageSnapshot.capture(page)

        # ---------------------------------------------------------------------
        # Login wall check
        # ---------------------------------------------------------------------
        if is_login_wall(
            snapshot,
            self.selectors.login_form,
            self.extraction.login_url_markers,
        ):
            logger.info(f"Redirected to login page ({snapshot.url})")
            return build_result(
                ScrapeOutcome.LOGIN_WALL,
                company_name=company_name,
                url=jobs_url,
            )

        # ---------------------------------------------------------------------
        # Extract
        # ---------------------------------------------------------------------
        count = extract_job_count(snapshot, self.strategies)
        if count is None:
            return build_result(
                ScrapeOutcome.NOT_FOUND,
                company_name=company_name,
                url=snapshot.url,
            )

        return build_result(
            ScrapeOutcome.SUCCESS,
            company_name=company_name,
            url=snapshot.url,
            count=count,
        )
