"""Validation utilities for JSON input and outline rows."""

import json
from typing import Any, List, Sequence, Set, Tuple

from ..models import FlatNode
from ..types import ValidationResult, ValidationError, ErrorType

DEEP_NESTING_WARNING = 20


class ValidationUtils:
    """Utility class for validating JSON text and row sequences."""

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        # Check if string is empty
        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        # Try to parse JSON
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        warnings.extend(ValidationUtils._structure_warnings(data))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def _structure_warnings(data: Any) -> List[str]:
        """Collect non-fatal warnings about a parsed value."""
        warnings = []

        if not isinstance(data, (dict, list)):
            warnings.append(
                f"Root element is {type(data).__name__}; a scalar root produces an empty outline"
            )
            return warnings

        max_depth = ValidationUtils._calculate_max_depth(data)
        if max_depth > DEEP_NESTING_WARNING:
            warnings.append(f"Deep nesting detected (depth: {max_depth}). The outline will be hard to edit.")

        return warnings

    @staticmethod
    def _calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth."""
        if not isinstance(data, (dict, list)):
            return current_depth

        children = data.values() if isinstance(data, dict) else data
        max_child_depth = current_depth
        for child in children:
            child_depth = ValidationUtils._calculate_max_depth(child, current_depth + 1)
            max_child_depth = max(max_child_depth, child_depth)

        return max_child_depth

    @staticmethod
    def validate_nodes(nodes: Sequence[FlatNode]) -> ValidationResult:
        """
        Validate a row sequence.

        Negative depths and duplicate ids are errors. A first row deeper than
        0 and a depth jump of more than one level are warnings, since nesting
        still attaches such rows to the nearest ancestor.

        Args:
            nodes: Row sequence to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []
        seen_ids: Set[str] = set()

        for index, node in enumerate(nodes):
            location = f"row {index}"

            if node.depth < 0:
                errors.append(ValidationError(
                    type=ErrorType.DEPTH,
                    message=f"Negative depth {node.depth}",
                    location=location
                ))

            if node.id in seen_ids:
                errors.append(ValidationError(
                    type=ErrorType.IDENTITY,
                    message=f"Duplicate row id '{node.id}'",
                    location=location
                ))
            seen_ids.add(node.id)

        for index, gap in ValidationUtils.find_depth_gaps(nodes):
            if index == 0:
                warnings.append(f"First row starts at depth {nodes[0].depth}")
            else:
                warnings.append(f"Depth jumps by {gap} levels at row {index}")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def find_depth_gaps(nodes: Sequence[FlatNode]) -> List[Tuple[int, int]]:
        """
        Find rows that are more than one level deeper than the row before.

        Args:
            nodes: Row sequence

        Returns:
            List of (index, jump) tuples
        """
        gaps = []
        previous_depth = -1
        for index, node in enumerate(nodes):
            jump = node.depth - previous_depth
            if jump > 1:
                gaps.append((index, jump))
            previous_depth = node.depth
        return gaps
