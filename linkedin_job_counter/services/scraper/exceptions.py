# =============================================================================
# Scraper Exceptions
# =============================================================================
"""
Exceptions raised by the LinkedIn scraper service.
"""


class ScraperError(Exception):
    """Base exception for scraper errors."""

    pass


class NavigationError(ScraperError):
    """
    Navigation to the jobs page failed on every attempt.

    The message is the last underlying failure's message so callers can
    report it verbatim.

    Attributes:
        url: URL that could not be loaded.
        attempts: Number of attempts made.
        cause: The last failure.
    """

    def __init__(self, url: str, attempts: int, cause: BaseException):
        """
        Initialize the exception.

        Args:
            url: URL that could not be loaded.
            attempts: Number of attempts made.
            cause: The last failure.
        """
        self.url = url
        self.attempts = attempts
        self.cause = cause
        super().__init__(str(cause))
