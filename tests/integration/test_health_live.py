# =============================================================================
# tests/integration/test_health_live.py - Deployed Health Check
# =============================================================================
# Smoke test for CI after a deploy: GET /api/health must answer 200 with a
# JSON body reporting "healthy", a timestamp, and do so within 2 seconds.
# =============================================================================

import os
import time
from datetime import datetime

import httpx
import pytest

TEST_URL = os.environ.get("TEST_URL", "").rstrip("/")
MAX_LATENCY_MS = 2000

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not TEST_URL, reason="TEST_URL not set"),
]


@pytest.fixture(scope="module")
def health_response():
    """One timed request shared by every check."""
    started = time.perf_counter()
    response = httpx.get(f"{TEST_URL}/api/health", timeout=10.0)
    elapsed_ms = (time.perf_counter() - started) * 1000
    return response, elapsed_ms


class TestDeployedHealth:
    """Checks run against the live deployment."""

    def test_status_code(self, health_response):
        response, _ = health_response
        assert response.status_code == 200

    def test_json_content_type(self, health_response):
        response, _ = health_response
        assert response.headers["content-type"].startswith("application/json")

    def test_reports_healthy(self, health_response):
        response, _ = health_response
        assert response.json()["status"] == "healthy"

    def test_has_timestamp(self, health_response):
        response, _ = health_response
        datetime.fromisoformat(response.json()["timestamp"])

    def test_answers_quickly(self, health_response):
        _, elapsed_ms = health_response
        assert elapsed_ms < MAX_LATENCY_MS, f"health took {elapsed_ms:.0f}ms"
