"""Configuration for the JSON Ontology editor."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class OntologyConfig:
    """
    Immutable editor configuration.

    Attributes:
        depth_marker: Character repeated ``depth + 1`` times in depth tokens.
        snippet_radius: Characters of context on each side of a source snippet.
        restore_arrays: Rebuild ``"[i]"``-keyed objects as lists when nesting.
            Off by default, which keeps arrays degrading to objects.
        enable_profiling: Profile flatten, nest and rematch with psutil.
        source_extensions: File suffixes treated as source text when loading.
    """

    depth_marker: str = "#"
    snippet_radius: int = 100
    restore_arrays: bool = False
    enable_profiling: bool = False
    source_extensions: Tuple[str, ...] = (".txt", ".md")

    def __post_init__(self) -> None:
        if len(self.depth_marker) != 1:
            raise ValueError(f"depth_marker must be a single character, got {self.depth_marker!r}")
        if self.snippet_radius < 0:
            raise ValueError(f"snippet_radius must be >= 0, got {self.snippet_radius}")
        if not all(ext.startswith(".") for ext in self.source_extensions):
            raise ValueError("source_extensions must start with '.'")
