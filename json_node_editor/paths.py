from __future__ import annotations

import json
from typing import List, Optional, Sequence, Union

from .errors import PathNotFoundError

PathSegment = Union[str, int]
Path = List[PathSegment]

ROOT_LOCATOR = "$"


def is_index_segment(segment) -> bool:
    # bool is an int subclass but never a valid array index
    return isinstance(segment, int) and not isinstance(segment, bool)


def format_segment(segment: PathSegment) -> str:
    if is_index_segment(segment):
        return str(segment)
    return json.dumps(str(segment), ensure_ascii=False)


def format_path(path: Optional[Sequence[PathSegment]]) -> str:
    """Render a path as a bracketed locator, e.g. ``$["customer"][0]``.

    - An empty or missing path is the root, ``$``.
    - Indices render as bare numbers, keys as double-quoted JSON strings.
    """
    if not path:
        return ROOT_LOCATOR
    return ROOT_LOCATOR + ''.join(f"[{format_segment(seg)}]" for seg in path)


def _read_quoted(locator: str, start: int) -> int:
    """Return the index just past the closing quote of the string at ``start``."""
    i = start + 1
    while i < len(locator):
        ch = locator[i]
        if ch == '\\':
            i += 2
            continue
        if ch == '"':
            return i + 1
        i += 1
    raise PathNotFoundError(f"Unterminated key in locator: {locator!r}")


def parse_path(locator: Optional[str]) -> Path:
    """Parse a locator produced by ``format_path`` back into path segments."""
    if locator is None:
        return []
    locator = locator.strip()
    if locator in ('', ROOT_LOCATOR):
        return []
    if not locator.startswith(ROOT_LOCATOR):
        raise PathNotFoundError(f"Locator must start with '$': {locator!r}")

    segments: Path = []
    i = len(ROOT_LOCATOR)
    while i < len(locator):
        if locator[i] != '[':
            raise PathNotFoundError(f"Expected '[' at position {i} in {locator!r}")
        i += 1
        if i < len(locator) and locator[i] == '"':
            end = _read_quoted(locator, i)
            try:
                segments.append(json.loads(locator[i:end]))
            except json.JSONDecodeError as e:
                raise PathNotFoundError(f"Invalid key in locator {locator!r}: {e}") from e
            i = end
        else:
            close = locator.find(']', i)
            if close == -1:
                raise PathNotFoundError(f"Unterminated index in locator: {locator!r}")
            raw = locator[i:close].strip()
            if not raw.isdigit():
                raise PathNotFoundError(f"Invalid index {raw!r} in locator {locator!r}")
            segments.append(int(raw))
            i = close
        if i >= len(locator) or locator[i] != ']':
            raise PathNotFoundError(f"Expected ']' at position {i} in {locator!r}")
        i += 1
    return segments
