"""Outline statistics: depth profile and match coverage."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from .models import FlatNode, is_container


@dataclass
class OutlineStats:
    """Summary of an outline's shape and match state."""
    total_rows: int
    container_rows: int
    leaf_rows: int
    max_depth: int
    depth_profile: List[int] = field(default_factory=list)
    mismatched_indices: List[int] = field(default_factory=list)
    unchecked_rows: int = 0

    @property
    def checked_rows(self) -> int:
        return self.total_rows - self.unchecked_rows

    @property
    def match_ratio(self) -> float:
        """Share of checked rows that matched, 1.0 when nothing is checked."""
        if self.checked_rows == 0:
            return 1.0
        return (self.checked_rows - len(self.mismatched_indices)) / self.checked_rows

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary for JSON serialization."""
        return {
            "totalRows": self.total_rows,
            "containerRows": self.container_rows,
            "leafRows": self.leaf_rows,
            "maxDepth": self.max_depth,
            "depthProfile": self.depth_profile,
            "mismatchedIndices": self.mismatched_indices,
            "uncheckedRows": self.unchecked_rows,
            "matchRatio": self.match_ratio,
        }


def analyze(nodes: Sequence[FlatNode]) -> OutlineStats:
    """
    Compute outline statistics.

    Args:
        nodes: Row sequence

    Returns:
        OutlineStats for the rows
    """
    containers = sum(1 for index in range(len(nodes)) if is_container(nodes, index))
    return OutlineStats(
        total_rows=len(nodes),
        container_rows=containers,
        leaf_rows=len(nodes) - containers,
        max_depth=max((node.depth for node in nodes), default=0),
        depth_profile=[node.depth for node in nodes],
        mismatched_indices=[index for index, node in enumerate(nodes) if node.is_match is False],
        unchecked_rows=sum(1 for node in nodes if node.is_match is None),
    )
