"""
Compare Strategies
One strategy per CompareType, bundling validation, normalization and comparison.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from .comparator import compare_boolean, compare_incremental
from .grammar import is_valid_boolean, is_valid_incremental, normalize_incremental
from .models import CompareType


class VersionStrategy(ABC):
    """Abstract base class for version compare strategies."""

    compare_type: CompareType

    @abstractmethod
    def validate(self, version: Optional[str]) -> bool:
        """Check if version is acceptable for this strategy."""
        pass

    @abstractmethod
    def normalize(self, version: str) -> str:
        """Bring a valid version into its comparable form."""
        pass

    @abstractmethod
    def compare(self, local: str, remote: str, depth: int) -> bool:
        """True if normalized local is older than normalized remote."""
        pass


class IncrementalStrategy(VersionStrategy):
    """Numeric, depth-bounded comparison of dotted versions."""

    compare_type = CompareType.INCREMENTAL

    def validate(self, version: Optional[str]) -> bool:
        return is_valid_incremental(version)

    def normalize(self, version: str) -> str:
        return normalize_incremental(version)

    def compare(self, local: str, remote: str, depth: int) -> bool:
        return compare_incremental(local, remote, depth)


class BooleanStrategy(VersionStrategy):
    """Raw string inequality. Depth is ignored."""

    compare_type = CompareType.BOOLEAN

    def validate(self, version: Optional[str]) -> bool:
        return is_valid_boolean(version)

    def normalize(self, version: str) -> str:
        return version

    def compare(self, local: str, remote: str, depth: int) -> bool:
        return compare_boolean(local, remote)


_STRATEGIES: Dict[CompareType, Type[VersionStrategy]] = {
    CompareType.INCREMENTAL: IncrementalStrategy,
    CompareType.BOOLEAN: BooleanStrategy,
}


def get_strategy(compare_type: CompareType) -> VersionStrategy:
    """Get the strategy for a compare type."""
    try:
        return _STRATEGIES[CompareType(compare_type)]()
    except (KeyError, ValueError):
        raise ValueError(f"Unknown compare type: {compare_type!r}") from None
