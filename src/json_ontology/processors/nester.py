"""Nester rebuilding nested JSON values from outline rows."""

import logging
import re
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from ..models import FlatNode, has_children
from ..types import NesterInterface

_INDEX_KEY = re.compile(r"^\[(\d+)\]$")

Container = Union[Dict[str, Any], List[Any]]


class Nester(NesterInterface):
    """
    Rebuilds a JSON value from a depth-tagged row sequence.

    Walks the rows once with a stack of ``(container, depth)`` pairs. The
    root is always an object and every container created along the way is
    an object; a value is appended only when its target is already a list.
    Arrays flattened to ``"[i]"`` keys therefore come back as objects unless
    ``restore_arrays`` is set.
    """

    def __init__(self, restore_arrays: bool = False,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the nester.

        Args:
            restore_arrays: Convert objects keyed exactly ``"[0]".."[n-1]"``
                back into lists after nesting
            logger: Optional logger instance
        """
        self.restore_arrays = restore_arrays
        self.logger = logger or logging.getLogger(__name__)

    def nest(self, nodes: Sequence[FlatNode]) -> Any:
        """
        Rebuild the nested value from rows.

        A row is a container when the next row is deeper, whatever its own
        value says. Depth gaps are tolerated: a row attaches to the nearest
        ancestor left on the stack. Duplicate sibling keys keep the last row.

        Args:
            nodes: Row sequence in pre-order

        Returns:
            Nested value, an empty dict for no rows
        """
        root: Dict[str, Any] = {}
        if not nodes:
            return root

        stack: List[Tuple[Container, int]] = [(root, -1)]

        for index, node in enumerate(nodes):
            while len(stack) > 1 and stack[-1][1] >= node.depth:
                stack.pop()

            parent = stack[-1][0]

            if has_children(nodes, index):
                container: Dict[str, Any] = {}
                self._attach(parent, node.key, container)
                stack.append((container, node.depth))
            else:
                value = list(node.value) if isinstance(node.value, list) else node.value
                self._attach(parent, node.key, value)

        self.logger.debug(f"Nested {len(nodes)} rows")

        if self.restore_arrays:
            return self._restore_arrays(root)
        return root

    @staticmethod
    def _attach(parent: Container, key: str, value: Any) -> None:
        if isinstance(parent, list):
            parent.append(value)
        else:
            parent[key] = value

    def _restore_arrays(self, value: Any) -> Any:
        if isinstance(value, dict):
            restored = {key: self._restore_arrays(child) for key, child in value.items()}
            if restored and self._is_index_keyed(restored):
                return list(restored.values())
            return restored
        return value

    @staticmethod
    def _is_index_keyed(value: Dict[str, Any]) -> bool:
        for position, key in enumerate(value):
            match = _INDEX_KEY.match(key)
            if not match or int(match.group(1)) != position:
                return False
        return True


def nest(nodes: Sequence[FlatNode]) -> Any:
    """Rebuild a nested value from outline rows."""
    return Nester().nest(nodes)
