"""Tree/row transforms for JSON outlines."""

from .flattener import Flattener, flatten
from .nester import Nester, nest

__all__ = ["Flattener", "Nester", "flatten", "nest"]
