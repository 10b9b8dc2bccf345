"""
Shared pytest fixtures for update checker tests

Provides a fixed configuration, a mock logger and helpers for faking
httpx clients and release resolutions. No test touches the network.
"""

import sys
from pathlib import Path
import pytest
from unittest.mock import AsyncMock, MagicMock, Mock

import httpx

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


RELEASES_URL = "https://github.com/Mayerch1/GithubUpdateCheckUnitTest/releases"
LATEST_URL = RELEASES_URL + "/latest"


# ============================================================================
# Mock Helpers
# ============================================================================

def make_response(url: str, status_error: Exception = None) -> Mock:
    """Fake httpx response whose final (redirect-resolved) URL is ``url``."""
    response = Mock()
    response.url = httpx.URL(url)
    response.raise_for_status = Mock(side_effect=status_error)
    return response


def make_status_error(status_code: int, url: str = LATEST_URL) -> httpx.HTTPStatusError:
    request = httpx.Request("HEAD", url)
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(f"{status_code} error", request=request, response=response)


def make_client(response: Mock = None, error: Exception = None) -> MagicMock:
    """Fake httpx.Client usable as a context manager."""
    client = MagicMock()
    client.head = Mock(return_value=response, side_effect=error)
    client.__enter__ = Mock(return_value=client)
    client.__exit__ = Mock(return_value=None)
    return client


def make_async_client(response: Mock = None, error: Exception = None) -> AsyncMock:
    """Fake httpx.AsyncClient usable as an async context manager."""
    client = AsyncMock()
    client.head = AsyncMock(return_value=response, side_effect=error)
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=None)
    return client


# ============================================================================
# Base Fixtures
# ============================================================================

@pytest.fixture
def config():
    """Configuration pointing at github.com with a short timeout."""
    from github_update_check.config import Config
    return Config(host="https://github.com", timeout=1.0, log_level="ERROR")


@pytest.fixture
def logger():
    """Standard mock logger for all tests."""
    from github_update_check.utils.logger import Logger
    return Mock(spec=Logger)


@pytest.fixture
def resolution():
    """
    Factory for ReleaseResolution values.

    Usage:
        def test_something(resolution):
            found = resolution("v.2.4.1.5")
            missing = resolution(None)
            failed = resolution(error=httpx.ConnectError("down"))
    """
    from github_update_check.resolver import ReleaseResolution, ResolutionStatus

    def _make(tag=None, error=None):
        if error is not None:
            return ReleaseResolution(
                status=ResolutionStatus.TRANSPORT_FAILED,
                request_url=LATEST_URL,
                error=error,
            )
        if tag is None:
            return ReleaseResolution(
                status=ResolutionStatus.NOT_FOUND,
                request_url=LATEST_URL,
                resolved_url=RELEASES_URL,
            )
        return ReleaseResolution(
            status=ResolutionStatus.FOUND,
            request_url=LATEST_URL,
            resolved_url=f"{RELEASES_URL}/tag/{tag}",
            tag=tag,
        )

    return _make


@pytest.fixture
def http():
    """
    Helpers for faking httpx.

    Usage:
        def test_something(http):
            client = http.client(http.response(".../releases/tag/v1.0.0"))
    """
    class _Http:
        response = staticmethod(make_response)
        status_error = staticmethod(make_status_error)
        client = staticmethod(make_client)
        async_client = staticmethod(make_async_client)

    return _Http
