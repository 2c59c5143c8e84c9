"""Tests for the file writer."""

import json
import pytest
from json_ontology.io.file_writer import FileWriter
from json_ontology.models import FlatNode, DocumentData
from json_ontology.processors.nester import Nester
from json_ontology.types import ProcessingError, ErrorType


class TestFileWriter:
    """Tests for FileWriter class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.writer = FileWriter()
        self.doc = DocumentData(
            name="contract",
            flat_nodes=[
                FlatNode(key="[0]", value="Zürich", depth=0, is_match=True),
                FlatNode(key="[1]", value="Bern", depth=0, is_match=False),
            ],
        )

    def test_write_ontology(self, temp_dir):
        """Test the nested value is written as ontology_<name>.json."""
        info = self.writer.write_ontology(self.doc, str(temp_dir))

        path = temp_dir / "ontology_contract.json"
        assert info["filename"] == "ontology_contract.json"
        assert info["size"] == path.stat().st_size
        text = path.read_text(encoding="utf-8")
        assert "Zürich" in text
        assert json.loads(text) == {"[0]": "Zürich", "[1]": "Bern"}

    def test_write_ontology_with_restoring_nester(self, temp_dir):
        """Test the given nester is used."""
        self.writer.write_ontology(self.doc, str(temp_dir), Nester(restore_arrays=True))

        data = json.loads((temp_dir / "ontology_contract.json").read_text(encoding="utf-8"))
        assert data == ["Zürich", "Bern"]

    def test_write_match_report(self, temp_dir):
        """Test the report lists stats and mismatched rows."""
        self.writer.write_match_report(self.doc, str(temp_dir))

        report = json.loads((temp_dir / "match_report_contract.json").read_text(encoding="utf-8"))
        assert report["document"] == "contract"
        assert report["stats"]["totalRows"] == 2
        assert [row["value"] for row in report["mismatches"]] == ["Bern"]

    def test_creates_missing_directory(self, temp_dir):
        """Test nested output directories are created."""
        output = temp_dir / "a" / "b"

        self.writer.write_ontology(self.doc, str(output))

        assert (output / "ontology_contract.json").exists()

    def test_unwritable_target_raises(self, temp_dir):
        """Test an output path that is a file raises a filesystem error."""
        blocker = temp_dir / "blocker"
        blocker.write_text("x")

        with pytest.raises(ProcessingError) as exc_info:
            self.writer.write_ontology(self.doc, str(blocker / "out"))

        assert exc_info.value.error_type == ErrorType.FILESYSTEM
