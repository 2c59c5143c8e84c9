"""File writer for exporting outlines and match reports."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from ..analysis import analyze
from ..models import DocumentData
from ..processors import Nester
from ..types import ProcessingError, ErrorType


class FileWriter:
    """
    Writes a document's nested JSON and its match report to disk.

    Output is indented JSON in UTF-8 with non-ASCII characters preserved.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the file writer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def write_ontology(self, doc: DocumentData, output_dir: str,
                       nester: Optional[Nester] = None) -> Dict[str, Any]:
        """
        Nest a document's rows and write the result as ``ontology_<name>.json``.

        Args:
            doc: Document to export
            output_dir: Output directory path
            nester: Optional Nester instance

        Returns:
            Dictionary with file information

        Raises:
            ProcessingError: If writing fails
        """
        nester = nester or Nester(logger=self.logger)
        data = nester.nest(doc.flat_nodes)
        return self._write_json(Path(output_dir), f"ontology_{doc.name}.json", data)

    def write_match_report(self, doc: DocumentData, output_dir: str) -> Dict[str, Any]:
        """
        Write ``match_report_<name>.json`` with stats and mismatched rows.

        Args:
            doc: Document to report on
            output_dir: Output directory path

        Returns:
            Dictionary with file information

        Raises:
            ProcessingError: If writing fails
        """
        stats = analyze(doc.flat_nodes)
        report = {
            "document": doc.name,
            "stats": stats.to_dict(),
            "mismatches": [doc.flat_nodes[index].to_dict() for index in stats.mismatched_indices],
        }
        return self._write_json(Path(output_dir), f"match_report_{doc.name}.json", report)

    def _write_json(self, output_path: Path, filename: str, data: Any) -> Dict[str, Any]:
        """
        Write a value to a JSON file.

        Args:
            output_path: Output directory path
            filename: File name inside the directory
            data: JSON-serializable value

        Returns:
            Dictionary with file information
        """
        self._ensure_directory_exists(output_path)
        file_path = output_path / filename

        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ProcessingError(
                f"Failed to write {file_path}: {str(e)}",
                ErrorType.FILESYSTEM,
                context={"output_dir": str(output_path), "filename": filename}
            )

        file_size = file_path.stat().st_size
        self.logger.info(f"Wrote {filename} ({file_size} bytes) to {output_path}")

        return {
            "filename": filename,
            "path": str(file_path.absolute()),
            "size": file_size,
        }

    def _ensure_directory_exists(self, directory_path: Path) -> None:
        """
        Ensure that a directory exists, creating it if necessary.

        Args:
            directory_path: Path to directory

        Raises:
            ProcessingError: If directory creation fails
        """
        try:
            directory_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ProcessingError(
                f"Failed to create directory {directory_path}: {str(e)}",
                ErrorType.FILESYSTEM,
                context={"output_dir": str(directory_path)}
            )

        if not os.access(directory_path, os.W_OK):
            raise ProcessingError(
                f"Directory {directory_path} is not writable",
                ErrorType.FILESYSTEM,
                context={"output_dir": str(directory_path)}
            )
