# =============================================================================
# LinkedIn Scraper Service Package
# =============================================================================
"""
Headless-browser scraper for LinkedIn company job counts.

Usage:
    from linkedin_job_counter.services.scraper import BrowserManager, LinkedInJobScraper

    manager = BrowserManager.from_settings(settings)
    scraper = LinkedInJobScraper.from_settings(manager, settings)
    result = await scraper.scrape("https://www.linkedin.com/company/acme", "Acme")
"""

from linkedin_job_counter.services.scraper.browser import BrowserManager
from linkedin_job_counter.services.scraper.exceptions import NavigationError, ScraperError
from linkedin_job_counter.services.scraper.service import LinkedInJobScraper

__all__ = [
    "BrowserManager",
    "LinkedInJobScraper",
    "NavigationError",
    "ScraperError",
]
