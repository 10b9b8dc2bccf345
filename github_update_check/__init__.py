"""
GitHub Update Check
Compare a local version against the latest GitHub release of a repository.
"""

__version__ = "2.0.0"
__package_name__ = "github-update-check"

from .checker import GithubUpdateCheck
from .errors import (
    InvalidVersionError,
    NoVersionError,
    ReleaseLookupError,
    UpdateCheckError,
)
from .versioning import CompareType, VersionChange

__all__ = [
    "GithubUpdateCheck",
    "CompareType",
    "VersionChange",
    # Errors
    "UpdateCheckError",
    "InvalidVersionError",
    "NoVersionError",
    "ReleaseLookupError",
    "__version__",
]
