"""Error handling implementation for the JSON Ontology editor."""

import logging
from typing import Optional, Sequence

from .models import FlatNode
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    ProcessingError,
    ErrorType
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for outline loading, editing and export.

    The transforms themselves do not fail on well-formed input; this class
    validates what reaches them and turns failures around them into
    recovery suggestions.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            return ValidationUtils.validate_json_string(input_data)
        except (TypeError, AttributeError) as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

    def validate_nodes(self, nodes: Sequence[FlatNode]) -> ValidationResult:
        """
        Validate an outline row sequence.

        Args:
            nodes: Rows to validate

        Returns:
            ValidationResult with validation details
        """
        result = ValidationUtils.validate_nodes(nodes)
        for warning in result.warnings:
            self.logger.debug(f"Outline warning: {warning}")
        return result

    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """
        Handle processing errors and provide recovery suggestions.

        Args:
            error: ProcessingError to handle

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"Processing error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.SYNTAX:
            return self._handle_syntax_error(error)
        elif error.error_type == ErrorType.DEPTH:
            return self._handle_depth_error(error)
        elif error.error_type == ErrorType.IDENTITY:
            return self._handle_identity_error(error)
        elif error.error_type == ErrorType.FILESYSTEM:
            return self._handle_filesystem_error(error)
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Unknown error type. Please check logs and retry.",
                partial_results=None
            )

    def _handle_syntax_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle JSON syntax errors."""
        return ErrorResponse(
            can_recover=False,
            suggested_action="Fix the JSON syntax and load the file again. "
                           "Documents that are already loaded are unchanged.",
            partial_results=None
        )

    def _handle_depth_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle rows with an invalid depth."""
        return ErrorResponse(
            can_recover=True,
            suggested_action="Adjust the depth of the reported rows. Rows deeper than "
                           "their parent are attached to the nearest shallower row.",
            partial_results=error.context.get("rows") if error.context else None
        )

    def _handle_identity_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle duplicate or missing row ids."""
        return ErrorResponse(
            can_recover=True,
            suggested_action="Reload the document to assign fresh row ids.",
            partial_results=error.context.get("duplicate_ids") if error.context else None
        )

    def _handle_filesystem_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle filesystem-related errors."""
        return ErrorResponse(
            can_recover=True,
            suggested_action="Check file permissions, available disk space, and directory access. "
                           "Ensure the output directory is writable.",
            partial_results=error.context.get("partial_files") if error.context else None
        )
