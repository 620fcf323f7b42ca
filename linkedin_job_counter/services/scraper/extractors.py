# =============================================================================
# Job Count Extractors
# =============================================================================
"""
Ordered cascade of strategies for pulling a job count out of a jobs page.

LinkedIn's markup changes between sessions, locales and accounts, so each
strategy is weaker but more general than the one before it. Strategies run
in order against a PageSnapshot and the first one that returns a count
wins; results are never merged.

Order:
    1. job count header element, first digit run of its text
    2. data attribute variant, attribute value as an integer
    3. text patterns over the page text
    4. first element whose text mentions "job" and contains a number
    5. number of job cards on the page
    6. JSON patterns over the raw HTML, only reached when nothing else matched

Note: every strategy is a plain ``(PageSnapshot) -> Optional[int]`` function
so each can be tested on fixture HTML without a browser.
"""

import logging
import re
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Optional, Pattern, Sequence

from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    NavigableString,
    RubyParenthesisString,
    RubyTextString,
    Script,
    Stylesheet,
    TemplateString,
)
from playwright.async_api import Page

from linkedin_job_counter.config import ExtractionSettings, SelectorSettings


# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------
DIGITS_RE = re.compile(r"(\d+)")
LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")
JOB_KEYWORD = "job"

# Every string a browser counts as text content, script and style included
PAGE_TEXT_TYPES = (
    NavigableString,
    CData,
    Script,
    Stylesheet,
    TemplateString,
    RubyTextString,
    RubyParenthesisString,
)


# -----------------------------------------------------------------------------
# Page Snapshot
# -----------------------------------------------------------------------------
@dataclass
class PageSnapshot:
    """
    View of a loaded page.

    Attributes:
        url: Page URL after redirects.
        html: Serialized page HTML.
        soup: Parsed document.
    """

    url: str
    html: str
    soup: BeautifulSoup = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.soup = BeautifulSoup(self.html, "lxml")

    @classmethod
    async def capture(cls, page: Page) -> "PageSnapshot":
        """
        Snapshot the current state of a live page.

        Args:
            page: Loaded Playwright page.

        Returns:
            PageSnapshot of the page's URL and DOM.
        """
        return cls(url=page.url, html=await page.content())

    @property
    def body_text(self) -> str:
        """
        Concatenated text of the document body.

        Inline script and style contents are part of the text, matching what
        a browser reports as the body's text content.
        """
        root = self.soup.body or self.soup
        return root.get_text(types=PAGE_TEXT_TYPES)


# -----------------------------------------------------------------------------
# Strategy Type
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ExtractionStrategy:
    """
    A named extraction step.

    Attributes:
        name: Label used in logs.
        extract: Returns a count or None for a snapshot.
    """

    name: str
    extract: Callable[[PageSnapshot], Optional[int]]


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def first_int(text: str) -> Optional[int]:
    """
    Return the first run of digits in text as an integer.

    Args:
        text: Text to search.

    Returns:
        The integer, or None if there are no digits.
    """
    match = DIGITS_RE.search(text)
    return int(match.group(1)) if match else None


def leading_int(value: str) -> Optional[int]:
    """
    Parse an integer from the start of a string, ignoring trailing junk.

    ``"12"`` and ``"12 jobs"`` give 12, ``"-5"`` gives -5, ``"abc"`` gives None.

    Args:
        value: String to parse.

    Returns:
        The integer, or None if the string does not start with one.
    """
    match = LEADING_INT_RE.match(value)
    return int(match.group(1)) if match else None


# -----------------------------------------------------------------------------
# Strategies
# -----------------------------------------------------------------------------
def from_count_element(snapshot: PageSnapshot, selector: str) -> Optional[int]:
    """Count from the text of the job count header element."""
    element = snapshot.soup.select_one(selector)
    if element is None:
        return None
    return first_int(element.get_text().strip())


def from_count_attribute(
    snapshot: PageSnapshot, selector: str, attribute: str
) -> Optional[int]:
    """Count from the data attribute of the alternate count element."""
    element = snapshot.soup.select_one(selector)
    if element is None:
        return None

    value = element.get(attribute)
    if not value or not isinstance(value, str):
        return None
    return leading_int(value)


def from_patterns(
    snapshot: PageSnapshot,
    patterns: Sequence[Pattern[str]],
    use_html: bool = False,
) -> Optional[int]:
    """
    Count from the first pattern that matches.

    Args:
        snapshot: Page to search.
        patterns: Compiled regexes capturing the count in group 1.
        use_html: Search the raw HTML instead of the body text.

    Returns:
        The captured count of the first matching pattern, or None.
    """
    haystack = snapshot.html if use_html else snapshot.body_text
    for pattern in patterns:
        match = pattern.search(haystack)
        if match:
            return int(match.group(1))
    return None


def from_job_mentions(snapshot: PageSnapshot) -> Optional[int]:
    """
    Count from the first element mentioning "job" alongside a number.

    Elements are visited in document order, so an enclosing element is
    considered before its children.
    """
    for element in snapshot.soup.find_all(True):
        text = element.get_text()
        if JOB_KEYWORD in text.lower():
            count = first_int(text)
            if count is not None:
                return count
    return None


def from_job_cards(snapshot: PageSnapshot, selector: str) -> Optional[int]:
    """Count of job cards listed on the page, if any."""
    cards = snapshot.soup.select(selector)
    return len(cards) if cards else None


# -----------------------------------------------------------------------------
# Cascade
# -----------------------------------------------------------------------------
def build_strategies(
    selectors: SelectorSettings,
    extraction: ExtractionSettings,
) -> list[ExtractionStrategy]:
    """
    Assemble the extraction cascade from configuration.

    Args:
        selectors: CSS selectors for count elements and job cards.
        extraction: Text and JSON patterns.

    Returns:
        Strategies in evaluation order.
    """
    text_patterns = [re.compile(p, re.IGNORECASE) for p in extraction.text_patterns]
    json_patterns = [re.compile(p) for p in extraction.json_patterns]

    return [
        ExtractionStrategy(
            "count_element",
            partial(from_count_element, selector=selectors.job_count),
        ),
        ExtractionStrategy(
            "count_attribute",
            partial(
                from_count_attribute,
                selector=selectors.alt_job_count,
                attribute=selectors.alt_job_count_attribute,
            ),
        ),
        ExtractionStrategy(
            "text_patterns",
            partial(from_patterns, patterns=text_patterns),
        ),
        ExtractionStrategy("job_mentions", from_job_mentions),
        ExtractionStrategy(
            "job_cards",
            partial(from_job_cards, selector=selectors.job_cards),
        ),
        ExtractionStrategy(
            "json_patterns",
            partial(from_patterns, patterns=json_patterns, use_html=True),
        ),
    ]


def extract_job_count(
    snapshot: PageSnapshot,
    strategies: Sequence[ExtractionStrategy],
) -> Optional[int]:
    """
    Run strategies in order and return the first count found.

    Args:
        snapshot: Loaded page.
        strategies: Cascade from ``build_strategies``.

    Returns:
        The job count, or None if no strategy matched.
    """
    for strategy in strategies:
        count = strategy.extract(snapshot)
        if count is not None:
            logger.debug(f"Job count {count} found by '{strategy.name}' on {snapshot.url}")
            return count

    logger.debug(f"No job count found on {snapshot.url}")
    return None
