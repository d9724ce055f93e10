"""
Shared pytest fixtures for DefectDash.
"""
import os
from datetime import UTC, datetime

import pytest

# Select "test" environment
os.environ["ENV"] = "test"
os.environ["DEBUG"] = "true"
os.environ["DASHBOARD_API_BASE_URL"] = "http://dashboard.test/api"

from mocks.mock_dashboard_api import MockDashboardAPI  # noqa: E402

from defectdash.adapters.dashboard_api.client import DashboardAPIClient  # noqa: E402

FIXED_NOW = datetime(2025, 5, 1, tzinfo=UTC)


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed evaluation time for date-based rules."""
    return FIXED_NOW


@pytest.fixture
def mock_api() -> MockDashboardAPI:
    """Fake remote dashboard API."""
    return MockDashboardAPI()


@pytest.fixture
def api_client(mock_api) -> DashboardAPIClient:
    """DashboardAPIClient wired to the fake API with a fixed clock."""
    return DashboardAPIClient(
        base_url="http://dashboard.test/api",
        token="test-token",
        transport=mock_api.transport(),
        clock=lambda: FIXED_NOW,
    )
