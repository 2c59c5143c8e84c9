"""Workspace holding loaded documents and pairing JSON files with sources."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .models import DocumentData, FlatNode
from .ontology import OntologyEditor
from .types import EditKind, ProcessingError

PathLike = Union[str, Path]


@dataclass
class LoadReport:
    """Result of loading a batch of files."""
    loaded: List[DocumentData] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    ignored: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors


class Workspace:
    """
    In-memory set of documents for one editing session.

    Loading is all-or-nothing per file: a JSON file that cannot be read or
    parsed is reported and skipped, and documents already in the workspace
    are never modified by a failed load.
    """

    def __init__(self, editor: Optional[OntologyEditor] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the workspace.

        Args:
            editor: Optional OntologyEditor used to build documents
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.editor = editor or OntologyEditor(logger=self.logger)
        self._documents: Dict[str, DocumentData] = {}
        self.active_id: Optional[str] = None

    @property
    def documents(self) -> List[DocumentData]:
        """Documents in load order."""
        return list(self._documents.values())

    def get(self, doc_id: str) -> Optional[DocumentData]:
        return self._documents.get(doc_id)

    def load_files(self, paths: Sequence[PathLike]) -> LoadReport:
        """
        Load JSON documents and pair them with source text files.

        With exactly one JSON file and one source file the two are paired.
        Otherwise ``name.json`` pairs with the first source file whose name
        starts with ``name``. Files of other types are ignored.

        Args:
            paths: Paths of JSON and source files

        Returns:
            LoadReport listing loaded documents and per-file errors
        """
        report = LoadReport()
        json_files: List[Path] = []
        text_files: List[Path] = []

        for path in map(Path, paths):
            suffix = path.suffix.lower()
            if suffix == ".json":
                json_files.append(path)
            elif suffix in self.editor.config.source_extensions:
                text_files.append(path)
            else:
                report.ignored.append(str(path))

        for json_file in json_files:
            name = json_file.stem
            paired = self._find_source(name, json_files, text_files)

            try:
                json_text = json_file.read_text(encoding="utf-8")
                source_text = paired.read_text(encoding="utf-8") if paired else ""
                doc = self.editor.load_document(name, json_text, source_text)
            except (OSError, UnicodeDecodeError, ValueError) as e:
                self.logger.error(f"Error loading {json_file.name}: {e}")
                report.errors.append(f"Error parsing {json_file.name}: {e}")
                continue

            report.loaded.append(doc)

        for doc in report.loaded:
            self._documents[doc.id] = doc
        if report.loaded and self.active_id is None:
            self.active_id = report.loaded[0].id

        self.logger.info(f"Loaded {len(report.loaded)} documents, {len(report.errors)} failed")
        return report

    @staticmethod
    def _find_source(name: str, json_files: List[Path], text_files: List[Path]) -> Optional[Path]:
        if len(json_files) == 1 and len(text_files) == 1:
            return text_files[0]
        for text_file in text_files:
            if text_file.name.startswith(name):
                return text_file
        return None

    def add(self, doc: DocumentData) -> DocumentData:
        """Add an already-built document."""
        self._documents[doc.id] = doc
        if self.active_id is None:
            self.active_id = doc.id
        return doc

    def remove(self, doc_id: str) -> bool:
        """Remove a document; clears the active id if it was active."""
        removed = self._documents.pop(doc_id, None) is not None
        if self.active_id == doc_id:
            self.active_id = None
        return removed

    def update_nodes(self, doc_id: str, nodes: List[FlatNode]) -> DocumentData:
        """
        Replace a document's rows wholesale.

        Args:
            doc_id: Id of the document to update
            nodes: Replacement rows

        Returns:
            Updated DocumentData

        Raises:
            KeyError: If the document is unknown
            ProcessingError: If a row has a negative depth or a repeated id;
                the stored document is left unchanged
        """
        doc = self._require(doc_id)
        result = self.editor.error_handler.validate_nodes(nodes)
        if not result.is_valid:
            first = result.errors[0]
            id_counts = Counter(node.id for node in nodes)
            raise ProcessingError(
                f"Cannot update {doc.name!r}: {first.message} at {first.location}",
                first.type,
                context={
                    "rows": [index for index, node in enumerate(nodes) if node.depth < 0],
                    "duplicate_ids": [node_id for node_id, count in id_counts.items() if count > 1],
                }
            )

        updated = doc.with_nodes(nodes)
        self._documents[doc_id] = updated
        return updated

    def edit(self, doc_id: str, node_id: str, kind: EditKind, text: str) -> DocumentData:
        """Apply a row edit to a document and store the result."""
        updated = self.editor.edit(self._require(doc_id), node_id, kind, text)
        self._documents[doc_id] = updated
        return updated

    def update_source(self, doc_id: str, source_text: str) -> DocumentData:
        """Replace a document's source text and rematch all rows."""
        doc = self._require(doc_id)
        updated = self.editor.replace_source(doc, source_text)
        self._documents[doc_id] = updated
        return updated

    def _require(self, doc_id: str) -> DocumentData:
        doc = self._documents.get(doc_id)
        if doc is None:
            raise KeyError(f"Unknown document: {doc_id}")
        return doc
