"""JSON parser with validation and root classification."""

import json
import logging
from typing import Any, Optional, Tuple

from .error_handler import ErrorHandler
from .types import RootKind


class JSONParser:
    """
    JSON parser that validates input before handing it to the flattener.

    Parse errors are raised here, before any document state is created, so
    a failed load cannot disturb documents already in memory.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> Tuple[Any, RootKind]:
        """
        Parse JSON string and classify its root.

        Args:
            json_string: JSON string to parse

        Returns:
            Tuple of (parsed_data, root_kind)

        Raises:
            ValueError: If JSON is invalid
        """
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid:
            error_messages = [error.message for error in validation_result.errors]
            raise ValueError(f"Invalid JSON input: {'; '.join(error_messages)}")

        for warning in validation_result.warnings:
            self.logger.warning(warning)

        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON input: {e.msg} at line {e.lineno}, column {e.colno}")

        root_kind = self.detect_root_kind(data)

        self.logger.info(f"Parsed JSON with root kind: {root_kind.value}")
        return data, root_kind

    def parse_file(self, path: str, encoding: str = "utf-8") -> Tuple[Any, RootKind]:
        """
        Read and parse a JSON file.

        Args:
            path: Path to the JSON file
            encoding: Text encoding

        Returns:
            Tuple of (parsed_data, root_kind)

        Raises:
            ValueError: If JSON is invalid
            OSError: If the file cannot be read
        """
        with open(path, "r", encoding=encoding) as handle:
            return self.parse(handle.read())

    @staticmethod
    def detect_root_kind(data: Any) -> RootKind:
        """
        Classify a parsed value's root.

        Args:
            data: Parsed JSON data

        Returns:
            RootKind enum
        """
        if isinstance(data, dict):
            return RootKind.OBJECT
        elif isinstance(data, list):
            return RootKind.ARRAY
        else:
            return RootKind.SCALAR
