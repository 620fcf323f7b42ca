# =============================================================================
# Job Count Extractor Tests
# =============================================================================
"""
Unit tests for the extraction cascade.

These tests verify that:
- Each strategy finds counts in its own kind of markup
- Strategies run in order and the first match wins
- A page with no count yields None
"""

import pytest

from linkedin_job_counter.config import ExtractionSettings, Settings
from linkedin_job_counter.services.scraper.extractors import (
    ExtractionStrategy,
    PageSnapshot,
    build_strategies,
    extract_job_count,
    first_int,
    from_count_attribute,
    from_count_element,
    from_job_cards,
    from_job_mentions,
    leading_int,
)
from tests.fakes import FakePage


URL = "https://www.linkedin.com/company/acme/jobs/"


def snapshot(body: str) -> PageSnapshot:
    """Wrap body markup in a document and snapshot it."""
    return PageSnapshot(url=URL, html=f"<html><body>{body}</body></html>")


def extract(body: str, settings: Settings):
    """Run the default cascade over body markup."""
    strategies = build_strategies(settings.selectors, settings.extraction)
    return extract_job_count(snapshot(body), strategies)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
class TestIntParsing:
    """Tests for the integer parsing helpers."""

    def test_first_int_finds_first_digit_run(self) -> None:
        assert first_int("Showing 42 of 100") == 42

    def test_first_int_without_digits(self) -> None:
        assert first_int("no numbers") is None

    @pytest.mark.parametrize(
        "value,expected",
        [("12", 12), ("  7", 7), ("12 jobs", 12), ("+3", 3), ("-5", -5), ("abc", None), ("", None)],
    )
    def test_leading_int(self, value: str, expected) -> None:
        assert leading_int(value) == expected


# -----------------------------------------------------------------------------
# Individual Strategies
# -----------------------------------------------------------------------------
class TestStrategies:
    """Tests for each strategy in isolation."""

    def test_count_element(self, settings: Settings) -> None:
        page = snapshot('<span class="results-context-header__job-count"> 42 jobs </span>')
        assert from_count_element(page, settings.selectors.job_count) == 42

    def test_count_element_without_digits(self, settings: Settings) -> None:
        page = snapshot('<span class="results-context-header__job-count">Jobs</span>')
        assert from_count_element(page, settings.selectors.job_count) is None

    def test_count_element_missing(self, settings: Settings) -> None:
        assert from_count_element(snapshot("<p>Hi</p>"), settings.selectors.job_count) is None

    def test_count_attribute(self, settings: Settings) -> None:
        page = snapshot('<div data-test-job-count="17"></div>')
        count = from_count_attribute(
            page,
            settings.selectors.alt_job_count,
            settings.selectors.alt_job_count_attribute,
        )
        assert count == 17

    def test_count_attribute_keeps_sign(self, settings: Settings) -> None:
        page = snapshot('<div data-test-job-count="-5"></div>')
        count = from_count_attribute(
            page,
            settings.selectors.alt_job_count,
            settings.selectors.alt_job_count_attribute,
        )
        assert count == -5

    def test_count_attribute_unparseable(self, settings: Settings) -> None:
        page = snapshot('<div data-test-job-count="many"></div>')
        count = from_count_attribute(
            page,
            settings.selectors.alt_job_count,
            settings.selectors.alt_job_count_attribute,
        )
        assert count is None

    def test_job_mentions(self) -> None:
        page = snapshot("<p>Job board</p><p>Team of 12</p>")
        assert from_job_mentions(page) == 12

    def test_job_mentions_needs_keyword(self) -> None:
        assert from_job_mentions(snapshot("<p>Team of 12</p>")) is None

    def test_job_cards(self, settings: Settings) -> None:
        page = snapshot(
            '<ul><li class="job-search-card">Engineer</li>'
            '<li class="job-card-container">Designer</li>'
            '<li class="job-search-card">PM</li></ul>'
        )
        assert from_job_cards(page, settings.selectors.job_cards) == 3

    def test_no_job_cards(self, settings: Settings) -> None:
        assert from_job_cards(snapshot("<ul></ul>"), settings.selectors.job_cards) is None


# -----------------------------------------------------------------------------
# Cascade
# -----------------------------------------------------------------------------
class TestCascade:
    """Tests for the ordered cascade."""

    def test_strategy_order(self, settings: Settings) -> None:
        names = [s.name for s in build_strategies(settings.selectors, settings.extraction)]
        assert names == [
            "count_element",
            "count_attribute",
            "text_patterns",
            "job_mentions",
            "job_cards",
            "json_patterns",
        ]

    def test_primary_selector_beats_text_pattern(self, settings: Settings) -> None:
        body = (
            "<p>Showing 99 results</p>"
            '<span class="results-context-header__job-count">42 jobs</span>'
        )
        assert extract(body, settings) == 42

    def test_attribute_beats_text_pattern(self, settings: Settings) -> None:
        body = '<p>10 jobs</p><div data-test-job-count="5"></div>'
        assert extract(body, settings) == 5

    def test_unparseable_attribute_falls_through(self, settings: Settings) -> None:
        body = '<div data-test-job-count="n/a"></div><p>8 open positions</p>'
        assert extract(body, settings) == 8

    @pytest.mark.parametrize(
        "body,expected",
        [
            ("<p>We have 7 jobs available</p>", 7),
            ("<p>There are 12 job openings</p>", 12),
            ("<p>8 open positions</p>", 8),
            ("<p>Showing 25 results</p>", 25),
            ("<p>3 available jobs</p>", 3),
            ("<p>15 JOBS</p>", 15),
        ],
    )
    def test_text_patterns(self, body: str, expected: int, settings: Settings) -> None:
        assert extract(body, settings) == expected

    def test_text_patterns_follow_configured_order(self, settings: Settings) -> None:
        # "job openings" is listed before "Showing N results"
        body = "<p>Showing 30 results</p><p>12 job openings</p>"
        assert extract(body, settings) == 12

    def test_json_pattern(self, settings: Settings) -> None:
        body = '<p>Careers at Acme</p><script>window.state = {"numResults":57};</script>'
        assert extract(body, settings) == 57

    def test_job_mentions_beat_json_pattern(self, settings: Settings) -> None:
        body = '<p>Job board 7</p><div data-state=\'{"totalJobCount":57}\'></div>'
        assert extract(body, settings) == 7

    def test_job_cards_beat_json_pattern(self, settings: Settings) -> None:
        body = (
            '<div class="job-search-card">Engineer</div>'
            '<div data-state=\'{"numResults":57}\'></div>'
        )
        assert extract(body, settings) == 1

    def test_text_pattern_inside_inline_script(self, settings: Settings) -> None:
        body = '<p>Careers at Acme</p><script>var banner = "31 open positions";</script>'
        assert extract(body, settings) == 31

    def test_json_stage_can_be_disabled(self) -> None:
        settings = Settings(_env_file=None, extraction=ExtractionSettings(json_patterns=[]))
        body = '<p>Careers at Acme</p><script>window.state = {"numResults":57};</script>'
        assert extract(body, settings) is None

    def test_job_mentions_fallback(self, settings: Settings) -> None:
        assert extract("<p>Job board</p><p>Team of 12</p>", settings) == 12

    def test_job_cards_fallback(self, settings: Settings) -> None:
        body = (
            '<div class="job-card-container">Engineer</div>'
            '<div class="job-card-container">Designer</div>'
        )
        assert extract(body, settings) == 2

    def test_nothing_found(self, settings: Settings) -> None:
        assert extract("<p>Nothing to see here</p>", settings) is None

    def test_same_page_same_count(self, settings: Settings) -> None:
        strategies = build_strategies(settings.selectors, settings.extraction)
        page = snapshot("<p>Showing 25 results</p>")
        assert extract_job_count(page, strategies) == extract_job_count(page, strategies) == 25

    def test_custom_strategies(self) -> None:
        strategies = [
            ExtractionStrategy("never", lambda s: None),
            ExtractionStrategy("always", lambda s: 3),
        ]
        assert extract_job_count(snapshot(""), strategies) == 3


class TestPageSnapshot:
    """Tests for PageSnapshot."""

    def test_body_text(self) -> None:
        page = PageSnapshot(url=URL, html="<html><body><b>42</b> jobs</body></html>")
        assert page.body_text == "42 jobs"

    def test_body_text_includes_script_and_style(self) -> None:
        page = PageSnapshot(
            url=URL,
            html="<html><body><p>a</p><script>b</script><style>c</style></body></html>",
        )
        assert page.body_text == "abc"

    def test_body_text_without_body(self) -> None:
        page = PageSnapshot(url=URL, html="")
        assert page.body_text == ""

    @pytest.mark.asyncio
    async def test_capture(self) -> None:
        page = FakePage(html="<p>hi</p>")
        await page.goto(URL)

        captured = await PageSnapshot.capture(page)

        assert captured.url == URL
        assert captured.html == "<p>hi</p>"
