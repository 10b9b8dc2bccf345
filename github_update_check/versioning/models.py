"""
Version types
Enums shared by the grammar, comparator and checker.
"""

from enum import Enum, IntEnum
from typing import Union


class VersionChange(IntEnum):
    """
    Comparison depth. The value is the number of leading version groups
    that are compared (1-based).

    Plain integers are accepted wherever a VersionChange is expected, so
    depths beyond REVISION can be requested for longer version numbers.
    """
    MAJOR = 1       # X.0.0.0
    MINOR = 2       # 0.X.0.0
    BUILD = 3       # 0.0.X.0
    REVISION = 4    # 0.0.0.X


class CompareType(Enum):
    """Algorithm used to compare the local and the remote version."""
    INCREMENTAL = "incremental"  # 2.0.0 is newer than 1.9999.0
    BOOLEAN = "boolean"          # any difference is an update


Depth = Union[VersionChange, int]


def parse_depth(value: str) -> int:
    """
    Parse a depth name ("minor") or number ("5") into an integer depth.

    Raises ValueError for unknown names and non-positive numbers.
    """
    name = value.strip().upper()
    if name in VersionChange.__members__:
        return int(VersionChange[name])
    depth = int(name)
    if depth < 1:
        raise ValueError(f"Comparison depth must be at least 1, got {depth}")
    return depth
