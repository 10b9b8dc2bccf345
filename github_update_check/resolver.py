"""
Release Resolver

Finds the tag of the latest release by requesting
``<host>/<owner>/<repository>/releases/latest`` and reading the URL the
host redirects to (``.../releases/tag/<TAG>``). No release API is used and
no page body is downloaded.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import unquote

import httpx

from github_update_check.config.settings import Config
from github_update_check.utils import Logger

TAG_MARKER = "/tag/"
LATEST_RELEASE_PATH = "/releases/latest"


class ResolutionStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    TRANSPORT_FAILED = "transport_failed"


@dataclass(frozen=True)
class ReleaseResolution:
    """Outcome of one latest-release lookup."""
    status: ResolutionStatus
    request_url: str
    resolved_url: Optional[str] = None
    tag: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def found(self) -> bool:
        return self.status is ResolutionStatus.FOUND


def build_latest_release_url(host: str, owner: Optional[str], repository: Optional[str]) -> str:
    """Build the latest-release URL. Missing owner/repository become empty segments."""
    return f"{host.rstrip('/')}/{owner or ''}/{repository or ''}{LATEST_RELEASE_PATH}"


def extract_tag(url: str) -> Optional[str]:
    """Get everything after the last /tag/ of a release URL, or None if there is none."""
    index = url.rfind(TAG_MARKER)
    if index == -1:
        return None
    return unquote(url[index + len(TAG_MARKER):])


class ReleaseResolver:
    """
    Resolves the latest release tag of one repository.

    Transport errors never propagate: they are reported as a
    TRANSPORT_FAILED resolution carrying the original exception.
    """

    def __init__(
        self,
        owner: Optional[str],
        repository: Optional[str],
        config: Config,
        logger: Optional[Logger] = None,
    ):
        self.config = config
        self.url = build_latest_release_url(config.host, owner, repository)
        self.logger = logger or Logger("github-update-check")

    def _client_options(self) -> dict:
        return {
            "timeout": self.config.timeout,
            "follow_redirects": True,
            "headers": self.config.headers,
        }

    def resolve(self) -> ReleaseResolution:
        """Look up the latest release (blocking)."""
        self.logger.debug(f"Resolving latest release: {self.url}")
        try:
            with httpx.Client(**self._client_options()) as client:
                response = client.head(self.url)
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            return self._failed(e)
        return self._interpret(str(response.url))

    async def resolve_async(self) -> ReleaseResolution:
        """Look up the latest release without blocking the event loop."""
        self.logger.debug(f"Resolving latest release: {self.url}")
        try:
            async with httpx.AsyncClient(**self._client_options()) as client:
                response = await client.head(self.url)
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            return self._failed(e)
        return self._interpret(str(response.url))

    def _interpret(self, resolved_url: str) -> ReleaseResolution:
        tag = extract_tag(resolved_url)
        if tag is None:
            # Repositories without releases redirect to the release list
            self.logger.debug(f"No release found for {self.url} (resolved to {resolved_url})")
            return ReleaseResolution(
                status=ResolutionStatus.NOT_FOUND,
                request_url=self.url,
                resolved_url=resolved_url,
            )

        self.logger.debug(f"Latest release of {self.url}: {tag}")
        return ReleaseResolution(
            status=ResolutionStatus.FOUND,
            request_url=self.url,
            resolved_url=resolved_url,
            tag=tag,
        )

    def _failed(self, error: Exception) -> ReleaseResolution:
        self.logger.warning(f"Release lookup failed for {self.url}: {error}")
        return ReleaseResolution(
            status=ResolutionStatus.TRANSPORT_FAILED,
            request_url=self.url,
            error=error,
        )
