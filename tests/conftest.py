"""Shared pytest fixtures for testing."""

import pytest
import respx

from elevenlabs_client import ElevenLabsClient, Settings

API_KEY = "test-api-key"
BASE_URL = "https://api.elevenlabs.test"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep process-wide settings and environment out of every test."""
    monkeypatch.delenv("ELEVENLABS_API_KEY", raising=False)
    monkeypatch.delenv("ELEVENLABS_BASE_URL", raising=False)
    Settings.reset()
    yield
    Settings.reset()


# =============================================================================
# HTTP Fixtures
# =============================================================================


@pytest.fixture
def mock_api():
    """Intercept every request the client sends."""
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def client(mock_api):
    """Client pointed at the mocked API."""
    with ElevenLabsClient(api_key=API_KEY, base_url=BASE_URL) as c:
        yield c


@pytest.fixture
def audio_bytes():
    return b"ID3\x04\x00fake-mp3-frames"
