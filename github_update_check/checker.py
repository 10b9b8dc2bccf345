"""
Update Checker

Checks whether a GitHub repository has released a newer version than
the one given by the caller.

Network problems are deliberately reported as "no update available":
an unreachable host cannot be told apart from being up to date.
Use version() when failures need to be visible.
"""

from dataclasses import dataclass, field
from typing import Optional

from github_update_check.config import Config, load_config
from github_update_check.errors import (
    InvalidVersionError,
    NoVersionError,
    ReleaseLookupError,
)
from github_update_check.resolver import ReleaseResolution, ReleaseResolver, ResolutionStatus
from github_update_check.utils import Logger
from github_update_check.versioning import CompareType, VersionChange, VersionStrategy, get_strategy
from github_update_check.versioning.models import Depth


@dataclass(frozen=True)
class GithubUpdateCheck:
    """
    Immutable handle for one repository and compare type.

    Two handles are equal when owner, repository and compare type match.
    Creating a handle performs no network access.

    Usage:
        checker = GithubUpdateCheck("Mayerch1", "GithubUpdateCheck")
        if checker.is_update_available("1.0.0", VersionChange.MINOR):
            ...
    """
    owner: Optional[str]
    repository: Optional[str]
    compare_type: CompareType = CompareType.INCREMENTAL
    config: Optional[Config] = field(default=None, compare=False, repr=False)

    _strategy: VersionStrategy = field(init=False, compare=False, repr=False)
    _resolver: ReleaseResolver = field(init=False, compare=False, repr=False)
    _logger: Logger = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        config = self.config or load_config()
        logger = Logger("github-update-check")
        object.__setattr__(self, "config", config)
        object.__setattr__(self, "compare_type", CompareType(self.compare_type))
        object.__setattr__(self, "_strategy", get_strategy(self.compare_type))
        object.__setattr__(self, "_logger", logger)
        object.__setattr__(self, "_resolver", ReleaseResolver(self.owner, self.repository, config, logger))

    @property
    def latest_release_url(self) -> str:
        return self._resolver.url

    # =========================================================================
    # Update check
    # =========================================================================

    def is_update_available(
        self,
        current_version: Optional[str],
        version_change: Depth = VersionChange.MINOR,
    ) -> bool:
        """
        Compare current_version to the latest release (blocking request).

        Args:
            current_version: Version of the running software
            version_change: Number of leading groups to compare. Ignored for
                CompareType.BOOLEAN.

        Returns:
            True if a newer version is released. False if not, if the
            repository has no release or if GitHub is not reachable.

        Raises:
            InvalidVersionError: current_version (before any request) or the
                released tag does not match the version pattern
            ValueError: depth below 1 with CompareType.INCREMENTAL
        """
        depth = self._check_local(current_version, version_change)
        return self._decide(current_version, self._resolver.resolve(), depth)

    async def is_update_available_async(
        self,
        current_version: Optional[str],
        version_change: Depth = VersionChange.MINOR,
    ) -> bool:
        """Same as is_update_available(), without blocking the event loop."""
        depth = self._check_local(current_version, version_change)
        return self._decide(current_version, await self._resolver.resolve_async(), depth)

    def _check_local(self, current_version: Optional[str], version_change: Depth) -> int:
        if not self._strategy.validate(current_version):
            raise InvalidVersionError(current_version, InvalidVersionError.LOCAL)
        depth = int(version_change)
        # Boolean comparison never looks at the depth
        if depth < 1 and self.compare_type is CompareType.INCREMENTAL:
            raise ValueError(f"Comparison depth must be at least 1, got {depth}")
        return depth

    def _decide(self, current_version: str, resolution: ReleaseResolution, depth: int) -> bool:
        if not resolution.found:
            self._logger.debug(f"No update: release {resolution.status.value} for {resolution.request_url}")
            return False

        remote = self._remote_version(resolution.tag)
        local = self._strategy.normalize(current_version)
        available = self._strategy.compare(local, remote, depth)
        self._logger.debug(
            f"Compared local {local} with remote {remote} "
            f"({self.compare_type.value}, depth {depth}): update={available}"
        )
        return available

    # =========================================================================
    # Latest version
    # =========================================================================

    def version(self) -> str:
        """
        Get the normalized version of the latest release (blocking request).

        Raises:
            NoVersionError: the repository has no release
            ReleaseLookupError: the request failed
            InvalidVersionError: the released tag does not match the version pattern
        """
        return self._latest_version(self._resolver.resolve())

    async def version_async(self) -> str:
        """Same as version(), without blocking the event loop."""
        return self._latest_version(await self._resolver.resolve_async())

    def _latest_version(self, resolution: ReleaseResolution) -> str:
        if resolution.status is ResolutionStatus.TRANSPORT_FAILED:
            raise ReleaseLookupError(resolution.request_url, str(resolution.error)) from resolution.error
        if resolution.status is ResolutionStatus.NOT_FOUND:
            raise NoVersionError(resolution.request_url)
        return self._remote_version(resolution.tag)

    def _remote_version(self, tag: Optional[str]) -> str:
        if not self._strategy.validate(tag):
            raise InvalidVersionError(tag, InvalidVersionError.REMOTE)
        return self._strategy.normalize(tag)
