"""Core logic for JSON Node Editor.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- resolve and format structural paths into a JSON document
- turn a node into typed field rows and a read-only display form
- coerce edited text and write rows back into the document
"""
from __future__ import annotations

from .accessors import resolve_path
from .config import EditorConfig, RowMatching
from .errors import NodeEditError, ParseError, PatchTargetError, PathNotFoundError
from .graph import build_node, iter_nodes
from .patching import apply_edits
from .paths import format_path, parse_path
from .rows import FieldType, Node, Row, normalize_rows
from .session import DocumentStore, NodeEditSession

__all__ = [
    "DocumentStore",
    "EditorConfig",
    "FieldType",
    "Node",
    "NodeEditError",
    "NodeEditSession",
    "ParseError",
    "PatchTargetError",
    "PathNotFoundError",
    "Row",
    "RowMatching",
    "apply_edits",
    "build_node",
    "format_path",
    "iter_nodes",
    "normalize_rows",
    "parse_path",
    "resolve_path",
]
