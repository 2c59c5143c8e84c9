"""Tests for validation utilities."""

import json
from json_ontology.models import FlatNode
from json_ontology.types import ErrorType
from json_ontology.utils.validation import ValidationUtils


class TestJSONStringValidation:
    """Tests for JSON text validation."""

    def test_valid_object(self):
        """Test a valid object passes without warnings."""
        result = ValidationUtils.validate_json_string('{"a": {"b": 1}}')

        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    def test_empty_string(self):
        """Test empty input is a syntax error."""
        result = ValidationUtils.validate_json_string("   ")

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "empty" in result.errors[0].message

    def test_invalid_syntax_reports_location(self):
        """Test syntax errors carry line and column."""
        result = ValidationUtils.validate_json_string('{"a": 1,,}')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert result.errors[0].location.startswith("line 1")

    def test_scalar_root_is_warning(self):
        """Test a scalar root is accepted with a warning."""
        result = ValidationUtils.validate_json_string('"just a string"')

        assert result.is_valid
        assert any("scalar root" in w for w in result.warnings)

    def test_deep_nesting_warning(self):
        """Test very deep documents produce a warning."""
        data = {}
        current = data
        for _ in range(25):
            current["n"] = {}
            current = current["n"]

        result = ValidationUtils.validate_json_string(json.dumps(data))

        assert result.is_valid
        assert any("Deep nesting" in w for w in result.warnings)


class TestNodeValidation:
    """Tests for row sequence validation."""

    def test_valid_sequence(self):
        """Test a flattener-shaped sequence passes."""
        nodes = [
            FlatNode(key="a", value="", depth=0),
            FlatNode(key="b", value=1, depth=1),
            FlatNode(key="c", value=2, depth=0),
        ]

        result = ValidationUtils.validate_nodes(nodes)

        assert result.is_valid
        assert result.warnings == []

    def test_empty_sequence(self):
        """Test no rows is valid."""
        assert ValidationUtils.validate_nodes([]).is_valid

    def test_duplicate_ids(self):
        """Test duplicate ids are errors."""
        nodes = [
            FlatNode(key="a", value=1, depth=0, id="same"),
            FlatNode(key="b", value=2, depth=0, id="same"),
        ]

        result = ValidationUtils.validate_nodes(nodes)

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.IDENTITY
        assert result.errors[0].location == "row 1"

    def test_negative_depth_after_mutation(self):
        """Test a row mutated to a negative depth is an error."""
        node = FlatNode(key="a", value=1, depth=0)
        node.depth = -1

        result = ValidationUtils.validate_nodes([node])

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.DEPTH

    def test_depth_gaps_are_warnings(self):
        """Test jumps of more than one level warn but stay valid."""
        nodes = [
            FlatNode(key="a", value="", depth=1),
            FlatNode(key="b", value=1, depth=4),
        ]

        result = ValidationUtils.validate_nodes(nodes)

        assert result.is_valid
        assert "First row starts at depth 1" in result.warnings
        assert "Depth jumps by 3 levels at row 1" in result.warnings

    def test_find_depth_gaps(self):
        """Test gap detection returns index and jump size."""
        nodes = [
            FlatNode(key="a", value="", depth=0),
            FlatNode(key="b", value="", depth=2),
            FlatNode(key="c", value=1, depth=3),
            FlatNode(key="d", value=1, depth=0),
        ]

        assert ValidationUtils.find_depth_gaps(nodes) == [(1, 2)]
