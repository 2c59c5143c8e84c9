"""Core type definitions for the JSON Ontology editor."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

if TYPE_CHECKING:
    from .models import FlatNode


class DataType(Enum):
    """Enumeration of JSON value kinds seen by the flattener."""
    DICT = "dict"
    LIST = "list"
    PRIMITIVE = "primitive"


class RootKind(Enum):
    """Enumeration of document root kinds."""
    OBJECT = "object"
    ARRAY = "array"
    SCALAR = "scalar"


class EditKind(Enum):
    """Enumeration of row-level edit kinds."""
    STRUCTURE = "structure"
    KEY = "key"
    VALUE = "value"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    DEPTH = "depth"
    IDENTITY = "identity"
    FILESYSTEM = "filesystem"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str
    partial_results: Optional[Any] = None


@dataclass
class SourceSnippet:
    """A match inside the source text with surrounding context."""
    before: str
    match: str
    after: str
    start: int


class ProcessingError(Exception):
    """Custom exception for processing errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


# Abstract base classes for interfaces

class FlattenerInterface(ABC):
    """Abstract interface for the tree-to-rows transform."""

    @abstractmethod
    def flatten(self, value: Any, depth: int = 0) -> List["FlatNode"]:
        """Flatten a JSON value into depth-tagged rows."""
        pass


class NesterInterface(ABC):
    """Abstract interface for the rows-to-tree transform."""

    @abstractmethod
    def nest(self, nodes: Sequence["FlatNode"]) -> Any:
        """Rebuild a JSON value from depth-tagged rows."""
        pass


class MatcherInterface(ABC):
    """Abstract interface for source presence matching."""

    @abstractmethod
    def matches(self, value: Any, source_text: str) -> bool:
        """Check whether a value appears in the source text."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def validate_nodes(self, nodes: Sequence["FlatNode"]) -> ValidationResult:
        """Validate a row sequence."""
        pass

    @abstractmethod
    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """Handle processing errors."""
        pass
