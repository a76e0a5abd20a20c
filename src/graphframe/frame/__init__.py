"""Frame package - GraphFrame structure and validation."""

from graphframe.frame.core import GraphFrame
from graphframe.frame.validation import validate_edges, validate_tables, validate_vertices

__all__ = [
    "GraphFrame",
    "validate_edges",
    "validate_tables",
    "validate_vertices",
]
