"""Row-level edit operations on a document's outline."""

import logging
import re
from typing import List, Optional

from .matcher import Matcher
from .models import DocumentData, FlatNode
from .types import EditKind


def parse_depth_token(token: str, marker: str = "#") -> int:
    """
    Parse a depth token into a depth.

    The depth is the number of leading marker characters minus one; a token
    without leading markers maps to depth 0.

    Args:
        token: User-entered structure text, e.g. ``"###"``
        marker: Marker character

    Returns:
        Non-negative depth
    """
    match = re.match(f"^({re.escape(marker)}+)", token)
    if not match:
        return 0
    return len(match.group(1)) - 1


def depth_token(depth: int, marker: str = "#") -> str:
    """Render the depth token for a depth."""
    return marker * (depth + 1)


class DocumentEditor:
    """
    Applies structure, key and value edits to a document.

    Each edit returns a new document whose row list differs from the old
    one only in the edited row; that row keeps its id. Only value edits and
    source replacement touch ``is_match``.
    """

    def __init__(self, matcher: Optional[Matcher] = None, depth_marker: str = "#",
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the editor.

        Args:
            matcher: Optional Matcher instance
            depth_marker: Marker character used in depth tokens
            logger: Optional logger instance
        """
        self.matcher = matcher or Matcher()
        self.depth_marker = depth_marker
        self.logger = logger or logging.getLogger(__name__)

    def apply_edit(self, doc: DocumentData, node_id: str, kind: EditKind, text: str) -> DocumentData:
        """
        Apply one edit to a row.

        Args:
            doc: Document to edit
            node_id: Id of the row to edit
            kind: Kind of edit
            text: Entered text

        Returns:
            New DocumentData with the edited row
        """
        if kind == EditKind.STRUCTURE:
            return self.edit_structure(doc, node_id, text)
        elif kind == EditKind.KEY:
            return self.edit_key(doc, node_id, text)
        elif kind == EditKind.VALUE:
            return self.edit_value(doc, node_id, text)
        raise ValueError(f"Unsupported edit kind: {kind}")

    def edit_structure(self, doc: DocumentData, node_id: str, token: str) -> DocumentData:
        """Set a row's depth from a depth token."""
        depth = parse_depth_token(token, self.depth_marker)
        return self._replace_row(doc, node_id, lambda node: node.clone(depth=depth))

    def edit_key(self, doc: DocumentData, node_id: str, key: str) -> DocumentData:
        """Replace a row's key verbatim."""
        return self._replace_row(doc, node_id, lambda node: node.clone(key=key))

    def edit_value(self, doc: DocumentData, node_id: str, value: str) -> DocumentData:
        """Replace a row's value verbatim and refresh its match flag."""
        is_match = self.matcher.matches(value, doc.source_text)
        return self._replace_row(doc, node_id, lambda node: node.clone(value=value, is_match=is_match))

    def replace_source(self, doc: DocumentData, source_text: str) -> DocumentData:
        """
        Replace a document's source text and rematch every row.

        Args:
            doc: Document to update
            source_text: New source text

        Returns:
            New DocumentData with refreshed match flags
        """
        nodes = self.matcher.rematch(doc.flat_nodes, source_text)
        self.logger.info(f"Replaced source of {doc.name!r} ({len(source_text)} chars)")
        return doc.with_source(source_text, nodes)

    def _replace_row(self, doc: DocumentData, node_id: str, change) -> DocumentData:
        nodes: List[FlatNode] = []
        found = False
        for node in doc.flat_nodes:
            if node.id == node_id:
                nodes.append(change(node))
                found = True
            else:
                nodes.append(node)

        if not found:
            self.logger.debug(f"No row {node_id!r} in {doc.name!r}, edit ignored")
        return doc.with_nodes(nodes)
