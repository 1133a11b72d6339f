from __future__ import annotations

from typing import Any, List, Optional


class NodeEditError(Exception):
    """Base class for failures that abort a node save."""


class ParseError(NodeEditError, ValueError):
    """The document text is not valid JSON."""

    def __init__(self, message: str, lineno: Optional[int] = None, colno: Optional[int] = None):
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno


class PathNotFoundError(NodeEditError, ValueError):
    """A path (or locator string) does not address anything in the document."""

    def __init__(self, message: str, path: Optional[List[Any]] = None, segment: Any = None):
        super().__init__(message)
        self.path = list(path or [])
        self.segment = segment


class PatchTargetError(NodeEditError, TypeError):
    """Keyed rows cannot be written because the addressed value is not an object."""
