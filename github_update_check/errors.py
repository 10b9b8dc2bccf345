"""
Errors
Exceptions raised by the update checker.
"""

from typing import Optional


class UpdateCheckError(Exception):
    """Base class for all update check errors."""


class InvalidVersionError(UpdateCheckError, ValueError):
    """
    A version string does not follow the pattern of the active compare type.

    ``side`` is "local" for the caller's version and "remote" for a tag
    published on the repository.
    """

    LOCAL = "local"
    REMOTE = "remote"

    def __init__(self, version: Optional[str], side: str = LOCAL):
        self.version = version
        self.side = side
        if side == self.REMOTE:
            message = f"{version!r} the remote version number does not follow the specified version pattern [Remote error]"
        else:
            message = f"{version!r} does not follow the specified version pattern [CurrentVersion]"
        super().__init__(message)

    @property
    def is_remote(self) -> bool:
        return self.side == self.REMOTE


class NoVersionError(UpdateCheckError, LookupError):
    """The repository has no published release."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"No release found at {url}")


class ReleaseLookupError(UpdateCheckError):
    """The latest release could not be looked up (network or HTTP failure)."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Release lookup failed for {url}: {reason}")
