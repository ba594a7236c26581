"""Shared fixtures for the quote builder test suite."""

import pytest
from fastapi.testclient import TestClient

from core.models import QuoteRequest
from web.api import app


@pytest.fixture
def make_request():
    """Build a request with every service off unless overridden."""
    def _make(**overrides) -> QuoteRequest:
        return QuoteRequest(**overrides)
    return _make


@pytest.fixture
def scenario_b() -> QuoteRequest:
    """Two full days of platinum video with reels, a long recap and expedited delivery."""
    return QuoteRequest(
        includes_videography=True,
        service_tier="platinum",
        video_rate_type="fullDay",
        video_days=2,
        num_reels=2,
        reel_duration=30,
        num_recaps=1,
        recap_duration=90,
        client_covers_travel=True,
        delivery_speed="expedited",
    )


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
