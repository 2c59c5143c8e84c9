"""Flattener turning nested JSON values into outline rows."""

import logging
from typing import Any, List, Optional

from ..models import FlatNode, EMPTY_MARKER
from ..types import DataType, FlattenerInterface


def detect_element_type(element: Any) -> DataType:
    """
    Detect the type of a single element.

    Args:
        element: Element to analyze

    Returns:
        DataType enum indicating the element type
    """
    if isinstance(element, dict):
        return DataType.DICT
    elif isinstance(element, list):
        return DataType.LIST
    else:
        return DataType.PRIMITIVE


def _opens_container(element: Any, in_array: bool = False) -> bool:
    element_type = detect_element_type(element)
    if element_type == DataType.DICT or (in_array and element_type == DataType.LIST):
        return True
    # An empty list under an object key stays a leaf holding [].
    return element_type == DataType.LIST and len(element) > 0


class Flattener(FlattenerInterface):
    """
    Converts a JSON value into a pre-order sequence of depth-tagged rows.

    Objects contribute one row per key and arrays one row per element,
    keyed ``"[i]"``. Containers are emitted as a row holding the empty
    marker, followed by their children one level deeper. Every object or
    array element of an array is a container, even when empty; an empty
    array held by an object key is a leaf row holding ``[]``.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the flattener.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def flatten(self, value: Any, depth: int = 0) -> List[FlatNode]:
        """
        Flatten a JSON value into rows.

        A scalar or null at the top level has no key to attach to and
        yields no rows.

        Args:
            value: Parsed JSON value
            depth: Depth assigned to the first level of rows

        Returns:
            List of FlatNode rows in pre-order
        """
        if depth < 0:
            raise ValueError("depth must be non-negative")

        if detect_element_type(value) == DataType.PRIMITIVE:
            self.logger.debug(f"Top-level {type(value).__name__} value produces no rows")
            return []

        nodes: List[FlatNode] = []
        self._flatten_into(value, depth, nodes)
        self.logger.debug(f"Flattened value into {len(nodes)} rows")
        return nodes

    def _flatten_into(self, value: Any, depth: int, nodes: List[FlatNode]) -> None:
        in_array = isinstance(value, list)
        if in_array:
            items = ((f"[{index}]", element) for index, element in enumerate(value))
        else:
            items = value.items()

        for key, element in items:
            if _opens_container(element, in_array):
                nodes.append(FlatNode(key=key, value=EMPTY_MARKER, depth=depth))
                self._flatten_into(element, depth + 1, nodes)
            else:
                if isinstance(element, list):
                    element = []
                nodes.append(FlatNode(key=key, value=element, depth=depth))


def flatten(value: Any, depth: int = 0) -> List[FlatNode]:
    """Flatten a JSON value into outline rows."""
    return Flattener().flatten(value, depth)
