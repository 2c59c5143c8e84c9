"""Data models for the JSON Ontology editor."""

from .flat_node import FlatNode, EMPTY_MARKER, has_children, is_container, children_slice
from .document import DocumentData

__all__ = [
    "FlatNode",
    "EMPTY_MARKER",
    "has_children",
    "is_container",
    "children_slice",
    "DocumentData",
]
