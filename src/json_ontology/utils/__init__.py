"""Utility functions for the JSON Ontology editor."""

from .ids import IdGenerator, generate_node_id, generate_document_id

__all__ = ["IdGenerator", "generate_node_id", "generate_document_id"]
