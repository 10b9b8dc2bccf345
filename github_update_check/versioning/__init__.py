"""
Versioning Module
Version grammar, comparison and compare strategies.
"""

from .models import CompareType, VersionChange
from .grammar import (
    is_valid_boolean,
    is_valid_incremental,
    normalize_incremental,
)
from .comparator import compare_boolean, compare_incremental
from .strategy import (
    BooleanStrategy,
    IncrementalStrategy,
    VersionStrategy,
    get_strategy,
)

__all__ = [
    "CompareType",
    "VersionChange",
    # Grammar
    "is_valid_incremental",
    "is_valid_boolean",
    "normalize_incremental",
    # Comparison
    "compare_incremental",
    "compare_boolean",
    # Strategies
    "VersionStrategy",
    "IncrementalStrategy",
    "BooleanStrategy",
    "get_strategy",
]
