# =============================================================================
# Config Package
# =============================================================================
"""
Application configuration and settings.
"""

from linkedin_job_counter.config.settings import (
    BrowserSettings,
    ExtractionSettings,
    NavigationSettings,
    RetrySettings,
    SelectorSettings,
    Settings,
    StealthSettings,
    get_settings,
)

__all__ = [
    "BrowserSettings",
    "ExtractionSettings",
    "NavigationSettings",
    "RetrySettings",
    "SelectorSettings",
    "Settings",
    "StealthSettings",
    "get_settings",
]
