"""Main entry point wiring parsing, transforms, matching and editing."""

import json
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Sequence

from .analysis import OutlineStats, analyze
from .config import OntologyConfig
from .editor import DocumentEditor, depth_token
from .error_handler import ErrorHandler
from .io.file_writer import FileWriter
from .matcher import Matcher
from .models import DocumentData, FlatNode
from .parser import JSONParser
from .processors import Flattener, Nester
from .profiler import PerformanceProfiler
from .types import EditKind, ProcessingError, SourceSnippet


class OntologyEditor:
    """
    Facade over the outline engine.

    Loads JSON text into documents, applies row edits, refreshes match
    flags and rebuilds nested JSON on demand. Every call returns new values;
    callers keep the current DocumentData themselves.
    """

    def __init__(self, config: Optional[OntologyConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the editor.

        Args:
            config: Optional OntologyConfig (defaults are used otherwise)
            logger: Optional logger instance
        """
        self.config = config or OntologyConfig()
        self.logger = logger or logging.getLogger(__name__)

        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.error_handler, self.logger)
        self.flattener = Flattener(self.logger)
        self.nester = Nester(restore_arrays=self.config.restore_arrays, logger=self.logger)
        self.matcher = Matcher(snippet_radius=self.config.snippet_radius, logger=self.logger)
        self.editor = DocumentEditor(self.matcher, self.config.depth_marker, self.logger)
        self.file_writer = FileWriter(self.logger)
        self.profiler = PerformanceProfiler(self.logger) if self.config.enable_profiling else None

    @contextmanager
    def _profiled(self, operation_name: str) -> Iterator[Optional[PerformanceProfiler]]:
        if self.profiler is None:
            yield None
            return
        with self.profiler.profile_operation(operation_name) as profiler:
            yield profiler

    def load_document(self, name: str, json_text: str, source_text: str = "") -> DocumentData:
        """
        Parse JSON text into a new document with match flags set.

        Args:
            name: Document name
            json_text: Raw JSON text
            source_text: Source text to match against

        Returns:
            New DocumentData

        Raises:
            ValueError: If the JSON text is invalid
        """
        data, root_kind = self.parser.parse(json_text)
        nodes = self.matcher.rematch(self.flatten(data), source_text)

        self.logger.info(f"Loaded {name!r}: {len(nodes)} rows from {root_kind.value} root")
        return DocumentData(name=name, flat_nodes=nodes, source_text=source_text, raw_json=data)

    def flatten(self, value: Any) -> List[FlatNode]:
        """Flatten a parsed JSON value into rows."""
        with self._profiled("flatten") as profiler:
            nodes = self.flattener.flatten(value)
            if profiler:
                profiler.rows_processed = len(nodes)
        return nodes

    def nest(self, nodes_or_doc: Any) -> Any:
        """Rebuild nested JSON from rows or from a document."""
        nodes = nodes_or_doc.flat_nodes if isinstance(nodes_or_doc, DocumentData) else nodes_or_doc
        with self._profiled("nest") as profiler:
            data = self.nester.nest(nodes)
            if profiler:
                profiler.rows_processed = len(nodes)
        return data

    def matches(self, value: Any, source_text: str) -> bool:
        """Check whether a value appears in the source text."""
        return self.matcher.matches(value, source_text)

    def snippet(self, doc: DocumentData, node_id: str) -> Optional[SourceSnippet]:
        """Get the source snippet for a row, if its value is found."""
        node = doc.find_node(node_id)
        if node is None:
            return None
        return self.matcher.find_snippet(node.value, doc.source_text)

    def edit(self, doc: DocumentData, node_id: str, kind: EditKind, text: str) -> DocumentData:
        """Apply a structure, key or value edit to one row."""
        return self.editor.apply_edit(doc, node_id, kind, text)

    def replace_source(self, doc: DocumentData, source_text: str) -> DocumentData:
        """Replace a document's source text and rematch all rows."""
        with self._profiled("rematch") as profiler:
            updated = self.editor.replace_source(doc, source_text)
            if profiler:
                profiler.rows_processed = len(updated.flat_nodes)
        return updated

    def render_outline(self, nodes: Sequence[FlatNode]) -> List[str]:
        """
        Render rows as ``<token> <key>: <value>`` lines.

        Mismatched rows are suffixed with ``  [not in source]``.
        """
        lines = []
        for node in nodes:
            token = depth_token(node.depth, self.config.depth_marker)
            line = f"{token} {node.key}"
            if not isinstance(node.value, str):
                line += f": {json.dumps(node.value)}"
            elif node.value:
                line += f": {node.value}"
            if node.is_match is False:
                line += "  [not in source]"
            lines.append(line)
        return lines

    def analyze(self, doc: DocumentData) -> OutlineStats:
        """Compute outline statistics for a document."""
        return analyze(doc.flat_nodes)

    def export(self, doc: DocumentData, output_dir: str) -> Dict[str, Any]:
        """
        Write the nested ontology and match report for a document.

        Args:
            doc: Document to export
            output_dir: Output directory path

        Returns:
            Dictionary with written file information

        Raises:
            ProcessingError: If a file cannot be written; a failed report
                write lists the written ontology under ``partial_files``
        """
        with self._profiled("export") as profiler:
            ontology = self.file_writer.write_ontology(doc, output_dir, self.nester)
            try:
                report = self.file_writer.write_match_report(doc, output_dir)
            except ProcessingError as e:
                e.context = dict(e.context or {}, partial_files=[ontology["path"]])
                raise
            if profiler:
                profiler.rows_processed = len(doc.flat_nodes)
        return {"ontology": ontology, "report": report}
