"""
Version comparison.

Both functions answer the same question: is ``local`` older than
``remote``? Inputs are normalized version strings.
"""

from typing import List


def _groups(version: str) -> List[int]:
    return [int(part) for part in version.split(".")]


def compare_incremental(local: str, remote: str, depth: int) -> bool:
    """
    Compare two normalized incremental versions group by group.

    Only the first ``depth`` groups are considered, and never more groups
    than the shorter version has. Missing trailing groups are not treated
    as zero: "2.4" and "2.4.1.5" are equal at MINOR depth.

        local[i] < remote[i]  -> True (update available)
        local[i] > remote[i]  -> False
        equal                 -> next group, False once depth is exhausted
    """
    if depth < 1:
        raise ValueError(f"Comparison depth must be at least 1, got {depth}")

    local_groups = _groups(local)
    remote_groups = _groups(remote)
    max_depth = min(depth, len(local_groups), len(remote_groups))

    for index in range(max_depth):
        if local_groups[index] < remote_groups[index]:
            return True
        if local_groups[index] > remote_groups[index]:
            return False

    return False


def compare_boolean(local: str, remote: str) -> bool:
    """Any difference between the strings counts as an update."""
    return local != remote
