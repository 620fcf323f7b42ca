# =============================================================================
# Shared Browser Manager
# =============================================================================
"""
Process-wide Chromium handle shared by all scrape requests.

Lifecycle:
    - Created once at application startup without launching anything.
    - Chromium is launched lazily by the first caller of ``get_browser``;
      concurrent first callers wait on the same launch.
    - Each request gets its own BrowserContext from ``new_context`` and owns
      it exclusively; the request must close it.
    - ``close`` shuts down the browser and the Playwright driver on
      application shutdown.
"""

import asyncio
import json
import logging
import random
from typing import Any, Callable, Optional

from playwright.async_api import Browser, BrowserContext, Playwright, async_playwright

from linkedin_job_counter.config import BrowserSettings, Settings, StealthSettings


# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Stealth Script
# -----------------------------------------------------------------------------
def build_stealth_script(stealth: StealthSettings) -> str:
    """
    Build the init script that masks common headless-browser fingerprints.

    Args:
        stealth: Anti-detection options.

    Returns:
        JavaScript source, or an empty string when every override is off.
    """
    overrides = []

    if stealth.mask_webdriver:
        overrides.append(
            "Object.defineProperty(navigator, 'webdriver', { get: () => false });"
        )
    if stealth.emulate_plugins:
        overrides.append(
            "Object.defineProperty(navigator, 'plugins', { get: () => [1, 2, 3, 4, 5] });"
        )
    if stealth.emulate_languages:
        overrides.append(
            "Object.defineProperty(navigator, 'languages', "
            f"{{ get: () => {json.dumps(stealth.languages)} }});"
        )

    return "\n".join(overrides)


# -----------------------------------------------------------------------------
# Browser Manager
# -----------------------------------------------------------------------------
class BrowserManager:
    """
    Lazily launched, shared Chromium instance.

    Attributes:
        browser_settings: Launch and viewport options.
        stealth: Anti-detection options applied to each context.
        executable_path: Chromium binary to launch, or None for Playwright's own.
    """

    def __init__(
        self,
        browser_settings: BrowserSettings,
        stealth: StealthSettings,
        executable_path: Optional[str] = None,
        playwright_factory: Callable[[], Any] = async_playwright,
    ) -> None:
        """
        Initialize the manager. Nothing is launched until first use.

        Args:
            browser_settings: Launch and viewport options.
            stealth: Anti-detection options applied to each context.
            executable_path: Chromium binary to launch.
            playwright_factory: Returns an object whose ``start()`` yields a
                Playwright instance.
        """
        self.browser_settings = browser_settings
        self.stealth = stealth
        self.executable_path = executable_path
        self._playwright_factory = playwright_factory
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._lock = asyncio.Lock()
        self._rotation_index = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> "BrowserManager":
        """
        Create a manager from application settings.

        Args:
            settings: Application settings.

        Returns:
            Unlaunched BrowserManager.
        """
        return cls(
            browser_settings=settings.chromium,
            stealth=settings.stealth,
            executable_path=settings.chromium_executable_path,
        )

    @property
    def is_running(self) -> bool:
        """Whether Chromium has been launched and not yet closed."""
        return self._browser is not None

    # -------------------------------------------------------------------------
    # Public Methods
    # -------------------------------------------------------------------------
    async def get_browser(self) -> Browser:
        """
        Return the shared browser, launching it on first use.

        Returns:
            The running Browser.
        """
        if self._browser is not None:
            return self._browser

        async with self._lock:
            if self._browser is None:
                await self._launch()

        return self._browser

    async def new_context(self) -> BrowserContext:
        """
        Open an isolated browsing context with stealth overrides applied.

        Returns:
            A new BrowserContext owned by the caller.
        """
        browser = await self.get_browser()

        context = await browser.new_context(
            user_agent=self.next_user_agent(),
            viewport={
                "width": self.browser_settings.viewport_width,
                "height": self.browser_settings.viewport_height,
            },
        )

        script = build_stealth_script(self.stealth)
        if script:
            try:
                await context.add_init_script(script)
            except Exception:
                await context.close()
                raise

        return context

    def next_user_agent(self) -> str:
        """
        Pick the user agent for the next browsing context.

        Returns:
            User agent string chosen per the rotation policy.
        """
        agents = self.stealth.user_agents
        if self.stealth.rotation == "random":
            return random.choice(agents)
        if self.stealth.rotation == "round_robin":
            agent = agents[self._rotation_index % len(agents)]
            self._rotation_index += 1
            return agent
        return agents[0]

    async def close(self) -> None:
        """
        Close the browser and stop the Playwright driver.

        Safe to call when nothing was launched.
        """
        async with self._lock:
            if self._browser is not None:
                await self._browser.close()
                self._browser = None
                logger.info("Chromium browser closed")

            if self._playwright is not None:
                await self._playwright.stop()
                self._playwright = None

    # -------------------------------------------------------------------------
    # Private Methods
    # -------------------------------------------------------------------------
    async def _launch(self) -> None:
        """Start Playwright and launch Chromium."""
        logger.info("Launching Chromium browser")
        self._playwright = await self._playwright_factory().start()

        try:
            self._browser = await self._playwright.chromium.launch(
                headless=self.browser_settings.headless,
                executable_path=self.executable_path,
                args=self.browser_settings.launch_args,
            )
        except Exception:
            await self._playwright.stop()
            self._playwright = None
            raise

        logger.info("Chromium browser launched")
