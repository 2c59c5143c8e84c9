"""Exact substring presence matching between values and source text."""

import logging
from typing import Any, List, Optional, Sequence

from .models import FlatNode
from .types import MatcherInterface, SourceSnippet


def _candidate(value: Any) -> Optional[str]:
    """Return the trimmed search string for a value, or None when not applicable."""
    if not isinstance(value, str):
        return None
    candidate = value.strip()
    return candidate or None


class Matcher(MatcherInterface):
    """
    Flags whether a row's value appears verbatim in the source text.

    Only the ends of the value are trimmed. Matching is case- and
    whitespace-sensitive and the source text is never normalized.
    Non-string and blank values always match.
    """

    def __init__(self, snippet_radius: int = 100,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the matcher.

        Args:
            snippet_radius: Characters of context around a snippet match
            logger: Optional logger instance
        """
        self.snippet_radius = snippet_radius
        self.logger = logger or logging.getLogger(__name__)

    def matches(self, value: Any, source_text: str) -> bool:
        """
        Check whether a value appears in the source text.

        Args:
            value: Row value
            source_text: Text to search

        Returns:
            True if found or not applicable, False otherwise
        """
        candidate = _candidate(value)
        if candidate is None:
            return True
        return candidate in source_text

    def rematch(self, nodes: Sequence[FlatNode], source_text: str) -> List[FlatNode]:
        """
        Recompute ``is_match`` for every row.

        Args:
            nodes: Row sequence
            source_text: Text to search

        Returns:
            New row list with the same ids and refreshed flags
        """
        refreshed = [node.clone(is_match=self.matches(node.value, source_text)) for node in nodes]
        mismatches = sum(1 for node in refreshed if node.is_match is False)
        self.logger.debug(f"Rematched {len(refreshed)} rows, {mismatches} mismatched")
        return refreshed

    def find_snippet(self, value: Any, source_text: str,
                     radius: Optional[int] = None) -> Optional[SourceSnippet]:
        """
        Locate the first occurrence of a value with surrounding context.

        Args:
            value: Row value
            source_text: Text to search
            radius: Context characters on each side (defaults to snippet_radius)

        Returns:
            SourceSnippet, or None if the value is not a non-blank string
            present in the source
        """
        candidate = _candidate(value)
        if candidate is None:
            return None

        start = source_text.find(candidate)
        if start < 0:
            return None

        if radius is None:
            radius = self.snippet_radius
        end = start + len(candidate)
        return SourceSnippet(
            before=source_text[max(0, start - radius):start],
            match=candidate,
            after=source_text[end:end + radius],
            start=start,
        )


def matches(value: Any, source_text: str) -> bool:
    """Check whether a value appears verbatim in the source text."""
    return Matcher().matches(value, source_text)
