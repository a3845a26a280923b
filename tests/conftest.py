"""
Pytest configuration and fixtures.

Provides common test fixtures for all test modules.
"""

from typing import Callable

import pytest
from fastapi.testclient import TestClient

from prompt_marker.access import AccessGate
from prompt_marker.api import create_app
from prompt_marker.config import Settings
from prompt_marker.marking import MarkingEngine


# ==============================================================================
# Time Fixtures
# ==============================================================================


T0 = 1_700_000_000


@pytest.fixture
def t0() -> int:
    """A fixed epoch instant used as 'now' in gate tests."""
    return T0


# ==============================================================================
# Settings Fixtures
# ==============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings with fixed secrets."""
    return Settings(
        _env_file=None,
        access_code="TEST-CODE-01",
        cookie_secret="test-cookie-secret-for-testing",
        session_minutes=60,
        cookie_secure=False,
        min_words_gate=20,
        max_answer_chars=6000,
    )


# ==============================================================================
# Component Fixtures
# ==============================================================================


@pytest.fixture
def engine(test_settings: Settings) -> MarkingEngine:
    """Marking engine built on the test settings."""
    return MarkingEngine(test_settings)


@pytest.fixture
def gate(test_settings: Settings, t0: int) -> AccessGate:
    """Access gate whose clock is pinned to t0."""
    return AccessGate(test_settings, clock=lambda: float(t0))


@pytest.fixture
def client(test_settings: Settings) -> TestClient:
    """HTTP client for a freshly built app."""
    return TestClient(create_app(test_settings))


@pytest.fixture
def unlocked_client(client: TestClient, test_settings: Settings) -> TestClient:
    """HTTP client that already holds a session cookie."""
    response = client.post("/api/unlock", json={"code": test_settings.access_code})
    assert response.status_code == 200
    return client


# ==============================================================================
# Sample Submission Fixtures
# ==============================================================================


@pytest.fixture
def rome_prompt() -> str:
    """A prompt that satisfies all four dimensions."""
    return (
        "Act as a travel planner. Plan a weekend trip to Rome for a couple on a "
        "mid-range budget, include must-see sights, food recommendations, and a "
        "day-by-day format with timings."
    )


@pytest.fixture
def compose_prompt() -> Callable[..., str]:
    """
    Build a prompt from keyword phrases, padded with a neutral word.

    The padding word matches no detector, so only the given phrases
    decide which dimensions are present.
    """

    def _compose(*phrases: str, words: int = 20) -> str:
        text = " ".join(phrases)
        missing = words - len(text.split())
        padding = " ".join(["word"] * max(missing, 0))
        return " ".join(part for part in (text, padding) if part)

    return _compose
