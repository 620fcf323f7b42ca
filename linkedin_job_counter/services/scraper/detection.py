# =============================================================================
# Login Wall Detection
# =============================================================================
"""
Detection of LinkedIn authentication redirects.
"""

from typing import Iterable

from linkedin_job_counter.services.scraper.extractors import PageSnapshot


def is_login_wall(
    snapshot: PageSnapshot,
    login_form_selector: str,
    url_markers: Iterable[str] = ("checkpoint", "login"),
) -> bool:
    """
    Check whether the loaded page is an authentication wall.

    Args:
        snapshot: Current page state.
        login_form_selector: CSS selector for a login form.
        url_markers: Substrings that mark the URL as a login redirect.

    Returns:
        True if the URL contains a marker or a login form is present.
    """
    if any(marker in snapshot.url for marker in url_markers):
        return True

    return snapshot.soup.select_one(login_form_selector) is not None
