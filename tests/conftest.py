"""
Pytest configuration and shared fixtures.
"""

import os
import pytest
from unittest.mock import AsyncMock, MagicMock, patch


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from BUILDWATCH_* variables and any local .env file."""
    for name in list(os.environ):
        if name.startswith("BUILDWATCH_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


# ============================================================================
# Mock Fixtures
# ============================================================================

@pytest.fixture
def mock_httpx_client():
    """Create a mock httpx AsyncClient."""
    with patch("httpx.AsyncClient") as mock:
        client_instance = AsyncMock()
        mock.return_value.__aenter__.return_value = client_instance
        yield client_instance


@pytest.fixture
def mock_steam_client():
    """Create a mock SteamClient; set fetch_build_descriptor.side_effect per test."""
    client = MagicMock()
    client.fetch_build_descriptor = AsyncMock()
    return client


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def make_build():
    """Factory for BuildDescriptor values on the public branch."""
    from buildwatch.models.build import BuildDescriptor

    def _make(build_id: int, timestamp: int = 1700000000, description: str = "No description"):
        return BuildDescriptor(
            branch="public",
            build_id=build_id,
            timestamp=timestamp,
            description=description,
        )

    return _make


@pytest.fixture
def settings():
    """Settings with a short interval suitable for loop tests."""
    from buildwatch.core.config import Settings
    return Settings(poll_interval=0.01)


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def steam_client():
    """Create a SteamClient with default config."""
    from buildwatch.services.steam.client import SteamClient
    return SteamClient()
