"""I/O utilities for the JSON Ontology editor."""

from .file_writer import FileWriter

__all__ = ["FileWriter"]
