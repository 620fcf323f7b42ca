# =============================================================================
# Application Settings
# =============================================================================
"""
Pydantic Settings configuration for the LinkedIn Job Counter service.

Loads configuration from environment variables with validation and type safety.
Scraper tunables (selectors, text patterns, retry policy, timeouts, user
agents) live in nested groups so the scraping core can receive them as plain
parameters instead of reading global state.

Nested groups can be overridden with a double underscore delimiter, e.g.
``RETRY__MAX_ATTEMPTS=5`` or ``NAVIGATION__TIMEOUT_MS=20000``.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------
DEFAULT_USER_AGENTS = [
    (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/96.0.4664.110 Safari/537.36"
    ),
    (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/96.0.4664.110 Safari/537.36"
    ),
    (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:95.0) "
        "Gecko/20100101 Firefox/95.0"
    ),
    (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
        "(KHTML, like Gecko) Version/15.1 Safari/605.1.15"
    ),
]


# -----------------------------------------------------------------------------
# Nested Setting Groups
# -----------------------------------------------------------------------------
class BrowserSettings(BaseModel):
    """
    Browser launch and context options.

    Attributes:
        headless: Run Chromium without a visible window.
        launch_args: Extra command line flags passed to Chromium.
        viewport_width: Viewport width for new browsing contexts.
        viewport_height: Viewport height for new browsing contexts.
        production_executable_path: Chromium binary used in production.
    """

    headless: bool = True
    launch_args: list[str] = Field(
        default_factory=lambda: [
            "--no-sandbox",
            "--disable-setuid-sandbox",
            "--disable-dev-shm-usage",
            "--disable-gpu",
        ]
    )
    viewport_width: int = 1280
    viewport_height: int = 800
    production_executable_path: str = "/tmp/chromium"


class NavigationSettings(BaseModel):
    """
    Page navigation options.

    Attributes:
        wait_until: Load state that marks a navigation as complete.
        timeout_ms: Default timeout for navigation and page waits.
        jobs_path_suffix: Path appended to a company URL to reach its jobs page.
    """

    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"] = (
        "networkidle"
    )
    timeout_ms: int = Field(default=10000, gt=0)
    jobs_path_suffix: str = "jobs/"


class RetrySettings(BaseModel):
    """
    Navigation retry policy.

    Attributes:
        max_attempts: Total navigation attempts before giving up.
        delay_ms: Fixed pause between attempts.
        jitter_ms: Upper bound for random jitter. Not applied by the
            navigation retry loop, kept for callers that want it.
    """

    max_attempts: int = Field(default=3, ge=1)
    delay_ms: int = Field(default=2000, ge=0)
    jitter_ms: int = Field(default=1000, ge=0)


class SelectorSettings(BaseModel):
    """CSS selectors used for login-wall detection and count extraction."""

    job_count: str = ".results-context-header__job-count"
    alt_job_count: str = "[data-test-job-count]"
    alt_job_count_attribute: str = "data-test-job-count"
    job_cards: str = ".job-card-container, .job-search-card"
    login_form: str = 'form[action*="login"]'


class ExtractionSettings(BaseModel):
    """
    Text heuristics used by the extraction cascade.

    Attributes:
        text_patterns: Regexes applied in order to the page text. Each must
            capture the count in its first group. Matched case-insensitively.
        json_patterns: Regexes applied in order to the raw page HTML to pick
            counts out of embedded JSON state. Tried last, after every
            other stage has missed.
        login_url_markers: Substrings that mark a URL as a login redirect.
    """

    text_patterns: list[str] = Field(
        default_factory=lambda: [
            r"(\d+)\s+jobs",
            r"(\d+)\s+job openings",
            r"(\d+)\s+open positions",
            r"Showing\s+(\d+)\s+results",
            r"(\d+)\s+available jobs",
        ]
    )
    json_patterns: list[str] = Field(
        default_factory=lambda: [
            r'"jobCount":(\d+)',
            r'"totalJobCount":(\d+)',
            r'"numResults":(\d+)',
        ]
    )
    login_url_markers: list[str] = Field(
        default_factory=lambda: ["checkpoint", "login"]
    )


class StealthSettings(BaseModel):
    """
    Anti-detection options applied to every browsing context.

    Attributes:
        user_agents: User agent strings to choose from.
        rotation: How a user agent is picked for each new context.
        mask_webdriver: Report ``navigator.webdriver`` as false.
        emulate_plugins: Report a non-empty ``navigator.plugins``.
        emulate_languages: Report ``languages`` from ``navigator.languages``.
        languages: Languages reported when ``emulate_languages`` is set.
    """

    user_agents: list[str] = Field(default_factory=lambda: list(DEFAULT_USER_AGENTS))
    rotation: Literal["first", "round_robin", "random"] = "first"
    mask_webdriver: bool = True
    emulate_plugins: bool = True
    emulate_languages: bool = True
    languages: list[str] = Field(default_factory=lambda: ["en-US", "en"])

    @field_validator("user_agents")
    @classmethod
    def validate_user_agents(cls, v: list[str]) -> list[str]:
        """
        Ensure at least one user agent is configured.

        Args:
            v: The configured user agents.

        Returns:
            The validated list.

        Raises:
            ValueError: If the list is empty.
        """
        if not v:
            raise ValueError("At least one user agent is required")
        return v


# -----------------------------------------------------------------------------
# Application Settings
# -----------------------------------------------------------------------------
class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    The .env file is automatically loaded if present.

    Attributes:
        app_name: Name of the application.
        app_env: Current environment (development, staging, production).
        debug: Enable debug mode (API docs, uvicorn reload).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        api_host: Host address for the API server.
        port: Port number for the API server.
        cors_origins: Comma-separated list of allowed CORS origins.
        chromium: Browser launch and context options.
        navigation: Page navigation options.
        retry: Navigation retry policy.
        selectors: CSS selectors for detection and extraction.
        extraction: Text and JSON patterns for extraction.
        stealth: Anti-detection options.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="linkedin-job-counter",
        description="Name of the application"
    )
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )

    # -------------------------------------------------------------------------
    # API Settings
    # -------------------------------------------------------------------------
    api_host: str = Field(
        default="0.0.0.0",
        description="Host address for the API server"
    )
    port: int = Field(
        default=3000,
        description="Port number for the API server"
    )
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins"
    )

    # -------------------------------------------------------------------------
    # Scraper Settings
    # -------------------------------------------------------------------------
    chromium: BrowserSettings = Field(default_factory=BrowserSettings)
    navigation: NavigationSettings = Field(default_factory=NavigationSettings)
    retry: RetrySettings = Field(default_factory=RetrySettings)
    selectors: SelectorSettings = Field(default_factory=SelectorSettings)
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    stealth: StealthSettings = Field(default_factory=StealthSettings)

    # -------------------------------------------------------------------------
    # Model Configuration
    # -------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore"
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """
        Check if the service runs in production mode.

        Returns:
            True when app_env is production.
        """
        return self.app_env == "production"

    @property
    def chromium_executable_path(self) -> Optional[str]:
        """
        Resolve the Chromium binary to launch.

        Returns:
            The production binary path in production, otherwise None so
            Playwright uses its bundled browser.
        """
        if self.is_production:
            return self.chromium.production_executable_path
        return None

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse allowed CORS origins string into a list.

        Returns:
            List of allowed origin strings.
        """
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings instance.

    Uses LRU cache to ensure settings are only loaded once.

    Returns:
        Settings instance with loaded configuration.
    """
    return Settings()
