"""
Settings
Configuration for the update checker, read from the environment.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from github_update_check import __package_name__, __version__

# Load .env file
load_dotenv()


DEFAULT_HOST = "https://github.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"


def get_host() -> str:
    """
    Get the repository host.

    GITHUB_UPDATE_CHECK_HOST overrides the default (e.g. for GitHub Enterprise).
    """
    explicit_host = os.getenv("GITHUB_UPDATE_CHECK_HOST")
    if explicit_host:
        return explicit_host.rstrip("/")
    return DEFAULT_HOST


def get_timeout() -> float:
    """Get the request timeout in seconds. Invalid values use the default."""
    raw = os.getenv("GITHUB_UPDATE_CHECK_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_TIMEOUT


def get_log_level() -> str:
    return os.getenv("GITHUB_UPDATE_CHECK_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


@dataclass(frozen=True)
class Config:
    """Checker configuration."""
    host: str = DEFAULT_HOST
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = f"{__package_name__}/{__version__}"
    log_level: str = DEFAULT_LOG_LEVEL  # applied by the CLI, libraries leave logging to the application

    @property
    def headers(self) -> dict:
        return {"User-Agent": self.user_agent}


def load_config() -> Config:
    """Load configuration from environment."""
    return Config(
        host=get_host(),
        timeout=get_timeout(),
        log_level=get_log_level(),
    )
