"""Document model pairing an outline with its source text."""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from ..utils.ids import generate_document_id
from .flat_node import FlatNode


@dataclass
class DocumentData:
    """
    A loaded JSON document and the plain-text source it is checked against.

    ``flat_nodes`` is the editable state of the document. It is replaced
    wholesale on every edit; ``source_text`` can be replaced independently.
    """

    name: str
    flat_nodes: List[FlatNode]
    source_text: str = ""
    raw_json: Optional[Any] = None
    id: str = field(default_factory=generate_document_id)

    def __post_init__(self):
        """Validate document after initialization."""
        if not self.id:
            raise ValueError("id cannot be empty")

        if not isinstance(self.flat_nodes, list):
            self.flat_nodes = list(self.flat_nodes)

    def with_nodes(self, nodes: List[FlatNode]) -> 'DocumentData':
        """Return a copy of this document holding ``nodes``."""
        return replace(self, flat_nodes=list(nodes))

    def with_source(self, source_text: str, nodes: Optional[List[FlatNode]] = None) -> 'DocumentData':
        """Return a copy of this document with new source text (and optionally rows)."""
        if nodes is None:
            nodes = self.flat_nodes
        return replace(self, source_text=source_text, flat_nodes=list(nodes))

    def find_node(self, node_id: str) -> Optional[FlatNode]:
        """Find a row by id."""
        for node in self.flat_nodes:
            if node.id == node_id:
                return node
        return None

    def index_of(self, node_id: str) -> int:
        """Get the position of a row by id, or -1 if absent."""
        for index, node in enumerate(self.flat_nodes):
            if node.id == node_id:
                return index
        return -1

    def to_dict(self) -> Dict[str, Any]:
        """Convert document to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "sourceText": self.source_text,
            "flatNodes": [node.to_dict() for node in self.flat_nodes],
        }
