"""Tests for row-level edit operations."""

import pytest
from json_ontology.editor import DocumentEditor, parse_depth_token, depth_token
from json_ontology.processors.nester import Nester
from json_ontology.types import EditKind


class TestDepthTokens:
    """Tests for depth token parsing and rendering."""

    @pytest.mark.parametrize("token,depth", [
        ("#", 0),
        ("##", 1),
        ("###", 2),
        ("### heading", 2),
        ("", 0),
        ("abc", 0),
        ("a###", 0),
        (" ##", 0),
    ])
    def test_parse_depth_token(self, token, depth):
        """Test depth is leading markers minus one, never negative."""
        assert parse_depth_token(token) == depth

    def test_parse_custom_marker(self):
        """Test a custom marker character, including a regex metacharacter."""
        assert parse_depth_token("**x", marker="*") == 1
        assert parse_depth_token("##", marker="*") == 0

    @pytest.mark.parametrize("depth", [0, 1, 4])
    def test_render_then_parse(self, depth):
        """Test rendered tokens parse back to their depth."""
        assert parse_depth_token(depth_token(depth)) == depth

    def test_depth_token(self):
        """Test rendering repeats the marker depth + 1 times."""
        assert depth_token(0) == "#"
        assert depth_token(2) == "###"
        assert depth_token(1, marker=">") == ">>"


class TestDocumentEditor:
    """Tests for DocumentEditor class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.editor = DocumentEditor()

    def test_value_edit_found_in_source(self, sample_document):
        """Test editing b to a value present in the source flags a match."""
        b = sample_document.flat_nodes[1]

        updated = self.editor.edit_value(sample_document, b.id, "y")

        assert updated.flat_nodes[1].value == "y"
        assert updated.flat_nodes[1].is_match is True
        assert updated.flat_nodes[1].id == b.id

    def test_value_edit_missing_from_source(self, sample_document):
        """Test editing b against a source without the value flags a mismatch."""
        doc = sample_document.with_source("nothing relevant")
        b = doc.flat_nodes[1]

        updated = self.editor.edit_value(doc, b.id, "y")

        assert updated.flat_nodes[1].is_match is False

    def test_value_edit_is_verbatim(self, sample_document):
        """Test the entered text is stored without trimming."""
        b = sample_document.flat_nodes[1]

        updated = self.editor.edit_value(sample_document, b.id, "  y  ")

        assert updated.flat_nodes[1].value == "  y  "
        assert updated.flat_nodes[1].is_match is True

    def test_key_edit_keeps_match_flag(self, sample_document):
        """Test key edits are verbatim and leave is_match alone."""
        doc = sample_document.with_nodes(
            [n.clone(is_match=False) for n in sample_document.flat_nodes]
        )
        b = doc.flat_nodes[1]

        updated = self.editor.edit_key(doc, b.id, "")

        assert updated.flat_nodes[1].key == ""
        assert updated.flat_nodes[1].is_match is False

    def test_structure_edit(self, sample_document):
        """Test structure edits set the depth from the token."""
        c = sample_document.flat_nodes[2]

        updated = self.editor.edit_structure(sample_document, c.id, "##")

        assert updated.flat_nodes[2].depth == 1
        assert updated.flat_nodes[2].id == c.id
        assert Nester().nest(updated.flat_nodes) == {"a": {"b": "x", "c": 1}}

    def test_structure_edit_without_markers(self, sample_document):
        """Test a token with no markers moves the row to depth 0."""
        b = sample_document.flat_nodes[1]

        updated = self.editor.edit_structure(sample_document, b.id, "")

        assert updated.flat_nodes[1].depth == 0

    def test_structure_edit_keeps_match_flag(self, sample_document):
        """Test depth edits do not touch is_match."""
        b = sample_document.flat_nodes[1]

        updated = self.editor.edit_structure(sample_document, b.id, "#")

        assert updated.flat_nodes[1].is_match is None

    def test_other_rows_untouched(self, sample_document):
        """Test edits replace only the edited row."""
        b = sample_document.flat_nodes[1]

        updated = self.editor.edit_value(sample_document, b.id, "y")

        assert updated.flat_nodes[0] is sample_document.flat_nodes[0]
        assert updated.flat_nodes[2] is sample_document.flat_nodes[2]
        assert sample_document.flat_nodes[1].value == "x"
        assert updated is not sample_document

    def test_unknown_row_is_noop(self, sample_document):
        """Test an unknown id returns the same rows."""
        updated = self.editor.edit_key(sample_document, "missing", "k")

        assert [n.to_dict() for n in updated.flat_nodes] == [
            n.to_dict() for n in sample_document.flat_nodes
        ]

    @pytest.mark.parametrize("kind,text,field,expected", [
        (EditKind.STRUCTURE, "###", "depth", 2),
        (EditKind.KEY, "renamed", "key", "renamed"),
        (EditKind.VALUE, "new", "value", "new"),
    ])
    def test_apply_edit_dispatch(self, sample_document, kind, text, field, expected):
        """Test apply_edit routes each kind to its operation."""
        b = sample_document.flat_nodes[1]

        updated = self.editor.apply_edit(sample_document, b.id, kind, text)

        assert getattr(updated.flat_nodes[1], field) == expected

    def test_apply_edit_rejects_unknown_kind(self, sample_document):
        """Test apply_edit rejects a kind it does not know."""
        with pytest.raises(ValueError, match="Unsupported edit kind"):
            self.editor.apply_edit(sample_document, "id", "structure", "#")

    def test_replace_source_rematches_all_rows(self, sample_document):
        """Test a new source refreshes every row's flag."""
        updated = self.editor.replace_source(sample_document, "x marks the spot")

        assert updated.source_text == "x marks the spot"
        assert [n.is_match for n in updated.flat_nodes] == [True, True, True]

        updated = self.editor.replace_source(updated, "")
        assert [n.is_match for n in updated.flat_nodes] == [True, False, True]

    def test_custom_marker(self, sample_document):
        """Test the editor parses with its configured marker."""
        editor = DocumentEditor(depth_marker=">")
        b = sample_document.flat_nodes[1]

        updated = editor.edit_structure(sample_document, b.id, ">>>")

        assert updated.flat_nodes[1].depth == 2
