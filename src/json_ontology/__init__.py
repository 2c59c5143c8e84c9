"""
JSON Ontology - edit JSON documents as depth-tagged outlines.

Flattens nested JSON into rows that can be edited one at a time, nests the
rows back into JSON on demand, and flags row values that do not appear
verbatim in a paired source text.
"""

__version__ = "1.0.0"

from .config import OntologyConfig
from .editor import DocumentEditor, parse_depth_token, depth_token
from .matcher import Matcher, matches
from .models import DocumentData, FlatNode, EMPTY_MARKER
from .ontology import OntologyEditor
from .processors import Flattener, Nester, flatten, nest
from .types import EditKind, SourceSnippet
from .workspace import Workspace, LoadReport

__all__ = [
    "OntologyEditor",
    "OntologyConfig",
    "Workspace",
    "LoadReport",
    "DocumentEditor",
    "DocumentData",
    "FlatNode",
    "EMPTY_MARKER",
    "EditKind",
    "SourceSnippet",
    "Flattener",
    "Nester",
    "Matcher",
    "flatten",
    "nest",
    "matches",
    "parse_depth_token",
    "depth_token",
]
