# =============================================================================
# HTTP API Tests
# =============================================================================
"""
Tests for the HTTP surface.

The scraper dependency is overridden with a stub, so no browser is launched.
"""

from typing import Iterator, Optional

import pytest
from fastapi.testclient import TestClient

from linkedin_job_counter.api.main import create_app
from linkedin_job_counter.api.routes.scrape import get_scraper
from linkedin_job_counter.config import Settings, get_settings
from linkedin_job_counter.models.scrape import ScrapeOutcome, ScrapeResult, build_result
from tests.fakes import ACME_JOBS_URL, ACME_URL


class StubScraper:
    """Returns a canned result or raises a canned error."""

    def __init__(
        self,
        result: Optional[ScrapeResult] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def scrape(self, linkedin_url: str, company_name: str) -> ScrapeResult:
        self.calls.append((linkedin_url, company_name))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def app():
    """Fresh application with dependency overrides cleared afterwards."""
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Iterator[TestClient]:
    """Test client that runs the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client


def use_scraper(app, scraper: StubScraper) -> None:
    app.dependency_overrides[get_scraper] = lambda: scraper


# -----------------------------------------------------------------------------
# Health
# -----------------------------------------------------------------------------
class TestHealth:
    """Tests for the health endpoints."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_detailed_health(self, client: TestClient) -> None:
        response = client.get("/health/detailed")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["components"]["browser"]["status"] == "not_started"
        assert "version" in body


# -----------------------------------------------------------------------------
# Scrape
# -----------------------------------------------------------------------------
class TestScrape:
    """Tests for POST /scrape."""

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"linkedinUrl": ACME_URL},
            {"companyName": "Acme"},
            {"linkedinUrl": "", "companyName": "Acme"},
            {"linkedinUrl": ACME_URL, "companyName": None},
            {"linkedinUrl": 123, "companyName": "Acme"},
            {"linkedinUrl": ACME_URL, "companyName": False},
        ],
    )
    def test_missing_parameters(self, app, client: TestClient, body: dict) -> None:
        scraper = StubScraper()
        use_scraper(app, scraper)

        response = client.post("/scrape", json=body)

        assert response.status_code == 400
        assert response.json() == {
            "error": "Missing required parameters",
            "required": ["linkedinUrl", "companyName"],
        }
        assert scraper.calls == []

    def test_missing_body(self, app, client: TestClient) -> None:
        use_scraper(app, StubScraper())

        response = client.post("/scrape")

        assert response.status_code == 400

    def test_success(self, app, client: TestClient) -> None:
        scraper = StubScraper(
            result=build_result(
                ScrapeOutcome.SUCCESS, company_name="Acme", url=ACME_JOBS_URL, count=42
            )
        )
        use_scraper(app, scraper)

        response = client.post(
            "/scrape", json={"linkedinUrl": ACME_URL, "companyName": "Acme"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "company_name": "Acme",
            "openings_count": 42,
            "source": "LinkedIn Jobs Page (Playwright)",
            "url": ACME_JOBS_URL,
        }
        assert scraper.calls == [(ACME_URL, "Acme")]

    @pytest.mark.parametrize(
        "outcome,reason",
        [
            (ScrapeOutcome.LOGIN_WALL, "LinkedIn requires authentication"),
            (ScrapeOutcome.NOT_FOUND, "Job count not found on page"),
        ],
    )
    def test_unsuccessful_scrapes_are_200(
        self, app, client: TestClient, outcome: ScrapeOutcome, reason: str
    ) -> None:
        use_scraper(
            app,
            StubScraper(result=build_result(outcome, company_name="Acme", url=ACME_JOBS_URL)),
        )

        response = client.post(
            "/scrape", json={"linkedinUrl": ACME_URL, "companyName": "Acme"}
        )

        assert response.status_code == 200
        assert response.json()["openings_count"] == "N/A"
        assert response.json()["reason"] == reason

    def test_unexpected_error_in_development(self, app, client: TestClient) -> None:
        use_scraper(app, StubScraper(error=RuntimeError("browser crashed")))
        app.dependency_overrides[get_settings] = lambda: Settings(
            _env_file=None, app_env="development"
        )

        response = client.post(
            "/scrape", json={"linkedinUrl": ACME_URL, "companyName": "Acme"}
        )

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "browser crashed"
        assert "RuntimeError" in body["stack"]

    def test_unexpected_error_in_production(self, app, client: TestClient) -> None:
        use_scraper(app, StubScraper(error=RuntimeError("browser crashed")))
        app.dependency_overrides[get_settings] = lambda: Settings(
            _env_file=None, app_env="production"
        )

        response = client.post(
            "/scrape", json={"linkedinUrl": ACME_URL, "companyName": "Acme"}
        )

        assert response.status_code == 500
        assert response.json() == {"error": "browser crashed"}
