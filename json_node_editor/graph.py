from __future__ import annotations

from typing import Any, Iterator, Optional, Sequence

from .accessors import resolve_path
from .paths import Path, PathSegment, format_path
from .rows import Node, rows_from_value


def build_node(data: Any, path: Optional[Sequence[PathSegment]] = None, strict: bool = True) -> Node:
    """Return the node addressed by ``path``; its id is the path's locator.

    Raises ``PathNotFoundError`` when the path does not resolve, unless
    ``strict`` is False, in which case the rows come from the document root
    while the node keeps the requested path.
    """
    path = list(path or [])
    value = resolve_path(data, path, strict=strict)
    return Node(id=format_path(path), path=path, rows=rows_from_value(value, path))


def iter_nodes(data: Any, parent_path: Optional[Path] = None) -> Iterator[Node]:
    """Yield every selectable node, depth first, in document order.

    Objects and arrays are nodes; scalars are nodes only as array elements
    (or as the whole document), since object scalars are rows of their parent.
    """
    path: Path = list(parent_path or [])
    if isinstance(data, dict):
        yield Node(id=format_path(path), path=path, rows=rows_from_value(data, path))
        for k, v in data.items():
            if isinstance(v, (dict, list)):
                yield from iter_nodes(v, path + [k])
    elif isinstance(data, list):
        yield Node(id=format_path(path), path=path, rows=rows_from_value(data, path))
        for idx, item in enumerate(data):
            yield from iter_nodes(item, path + [idx])
    else:
        yield Node(id=format_path(path), path=path, rows=rows_from_value(data, path))
