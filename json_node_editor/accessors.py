from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from .errors import PathNotFoundError
from .paths import PathSegment, format_path, is_index_segment

logger = logging.getLogger(__name__)

_MISSING = object()


def _lookup(container: Any, segment: PathSegment) -> Any:
    if isinstance(container, dict):
        if isinstance(segment, str) and segment in container:
            return container[segment]
        return _MISSING
    if isinstance(container, list):
        if is_index_segment(segment) and 0 <= segment < len(container):
            return container[segment]
        return _MISSING
    return _MISSING


def resolve_path(data: Any, path: Optional[Sequence[PathSegment]], strict: bool = False) -> Any:
    """Walk ``path`` into parsed JSON and return the value found there.

    Keys index objects and integers index arrays. An empty path returns
    ``data`` itself. When a segment is missing the document root is
    returned instead, unless ``strict`` is set, in which case
    ``PathNotFoundError`` is raised.
    """
    if not path:
        return data

    val = data
    for depth, segment in enumerate(path):
        val = _lookup(val, segment)
        if val is _MISSING:
            if strict:
                raise PathNotFoundError(
                    f"{format_path(path[:depth + 1])} not found in document",
                    path=list(path),
                    segment=segment,
                )
            logger.debug("Path %s did not resolve at %r; using document root", format_path(path), segment)
            return data
    return val
