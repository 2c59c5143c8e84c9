"""Identifier generation for outline rows and documents."""

import itertools
import uuid


class IdGenerator:
    """
    Process-local generator of unique identifiers.

    Ids combine a random session token with a monotonic counter, so they
    are never reused within the process and carry no ordering meaning for
    callers.
    """

    def __init__(self, prefix: str = "node"):
        """
        Initialize the generator.

        Args:
            prefix: Prefix for generated ids
        """
        self.prefix = prefix
        self._session = uuid.uuid4().hex[:6]
        self._counter = itertools.count(1)

    def next_id(self) -> str:
        """Return a fresh identifier."""
        number = next(self._counter)
        return f"{self.prefix}_{self._session}_{number:04d}"


_node_ids = IdGenerator("node")
_document_ids = IdGenerator("doc")


def generate_node_id() -> str:
    """Generate a unique row id."""
    return _node_ids.next_id()


def generate_document_id() -> str:
    """Generate a unique document id."""
    return _document_ids.next_id()
