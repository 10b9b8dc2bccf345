"""
Version grammar.

Incremental versions look like ``1.0.0.0``, ``1.0.0``, ``v1.0.0`` or
``v.1.0.0``: one optional non-digit prefix character, optionally followed
by a dot, then any number of dot-separated digit groups.
"""

import re
from typing import Optional

# Full-string pattern: optional prefix, then digit groups without empty parts
INCREMENTAL_PATTERN = re.compile(r"([^0-9]\.?)?([0-9]+\.)*[0-9]+")

# Trailing digit groups, i.e. the version without its prefix
_NUMERIC_TAIL = re.compile(r"([0-9]+\.)*[0-9]+$")


def is_valid_incremental(version: Optional[str]) -> bool:
    """Check if version matches the incremental pattern."""
    if version is None:
        return False
    return INCREMENTAL_PATTERN.fullmatch(version) is not None


def is_valid_boolean(version: Optional[str]) -> bool:
    """Any string is valid for boolean comparison, including ""."""
    return version is not None


def normalize_incremental(version: str) -> str:
    """
    Strip the optional prefix ("v", "v.", "x", ...) from a valid version.

    The version must already pass is_valid_incremental().
    """
    match = _NUMERIC_TAIL.search(version)
    if not match:
        raise ValueError(f"Not an incremental version: {version!r}")
    return match.group(0)
