"""Flat outline row model and adjacency helpers."""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Sequence, Tuple

from ..utils.ids import generate_node_id

# Value carried by a row that introduces a container.
EMPTY_MARKER = ""


@dataclass
class FlatNode:
    """
    One row of the outline representation of a JSON value.

    A row has no parent reference: its place in the tree follows from its
    depth relative to its neighbours in the sequence.
    """

    key: str
    value: Any
    depth: int
    id: str = field(default_factory=generate_node_id)
    is_match: Optional[bool] = None

    def __post_init__(self):
        """Validate row after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate row integrity."""
        if not self.id:
            raise ValueError("id cannot be empty")

        if not isinstance(self.depth, int) or isinstance(self.depth, bool):
            raise ValueError(f"depth must be an integer, got {type(self.depth).__name__}")

        if self.depth < 0:
            raise ValueError("depth must be non-negative")

    def to_dict(self) -> Dict[str, Any]:
        """Convert row to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "key": self.key,
            "value": self.value,
            "depth": self.depth,
            "isMatch": self.is_match,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FlatNode':
        """Create FlatNode from dictionary."""
        return cls(
            id=data["id"],
            key=data.get("key", ""),
            value=data.get("value", EMPTY_MARKER),
            depth=data.get("depth", 0),
            is_match=data.get("isMatch"),
        )

    def clone(self, **changes: Any) -> 'FlatNode':
        """Return a copy of this row, keeping its id, with the given fields changed."""
        if "id" in changes:
            raise ValueError("id cannot be changed on an existing row")
        return replace(self, **changes)

    def has_string_value(self) -> bool:
        """Check if the row carries a non-empty string payload."""
        return isinstance(self.value, str) and self.value != EMPTY_MARKER


def has_children(nodes: Sequence[FlatNode], index: int) -> bool:
    """Check if the row after ``index`` exists and is deeper."""
    following = index + 1
    return following < len(nodes) and nodes[following].depth > nodes[index].depth


def is_container(nodes: Sequence[FlatNode], index: int) -> bool:
    """Check if the row at ``index`` is a container row."""
    return nodes[index].value == EMPTY_MARKER or has_children(nodes, index)


def children_slice(nodes: Sequence[FlatNode], index: int) -> Tuple[int, int]:
    """
    Get the index range of the children of the row at ``index``.

    Children are the maximal run of following rows deeper than the row.

    Args:
        nodes: Row sequence
        index: Index of the parent row

    Returns:
        Tuple of (start, stop), empty when the row has no children
    """
    depth = nodes[index].depth
    stop = index + 1
    while stop < len(nodes) and nodes[stop].depth > depth:
        stop += 1
    return index + 1, stop
