# =============================================================================
# Test Fixtures
# =============================================================================
"""
Shared pytest fixtures.
"""

import pytest

from linkedin_job_counter.config import Settings
from tests.fakes import RecordingSleep


@pytest.fixture
def settings() -> Settings:
    """
    Default settings, isolated from any local .env file.

    Returns:
        Settings with built-in defaults.
    """
    return Settings(_env_file=None)


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    """
    Sleep replacement that returns immediately.

    Returns:
        RecordingSleep instance.
    """
    return RecordingSleep()
