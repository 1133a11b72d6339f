"""Write edited rows back into a JSON document.

The document is always re-parsed from its text, edited in memory and
serialized again, so a failed save leaves the caller's text untouched.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterator, Optional, Sequence, Tuple

from .accessors import resolve_path
from .coercion import coerce_value
from .config import DEFAULT_CONFIG, EditorConfig, RowMatching
from .errors import ParseError, PatchTargetError
from .paths import PathSegment, format_path
from .rows import Row, value_to_text

logger = logging.getLogger(__name__)


def parse_document(text: Optional[str]) -> Any:
    """Parse document text; blank text and ``null`` both become ``{}``.

    Other falsy documents (``0``, ``false``, ``""``) are returned as parsed,
    so writing keyed rows into them raises ``PatchTargetError``.
    """
    if text is None or not text.strip():
        return {}
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Document is not valid JSON: {e}", lineno=e.lineno, colno=e.colno) from e
    return {} if doc is None else doc


def serialize_document(doc: Any, config: EditorConfig = DEFAULT_CONFIG) -> str:
    return json.dumps(doc, indent=config.indent, ensure_ascii=config.ensure_ascii)


def pair_rows(
    original_rows: Sequence[Row],
    edited_rows: Sequence[Row],
    matching: RowMatching = RowMatching.IDENTITY,
) -> Iterator[Tuple[Row, Optional[Row]]]:
    """Yield each edited row with the original row it was copied from."""
    by_id: Dict[str, Row] = {}
    if matching is RowMatching.IDENTITY:
        by_id = {row.row_id: row for row in original_rows if row.row_id}

    for idx, row in enumerate(edited_rows):
        if by_id and row.row_id:
            yield row, by_id.get(row.row_id)
        else:
            yield row, original_rows[idx] if idx < len(original_rows) else None


def apply_edits(
    document_text: Optional[str],
    path: Optional[Sequence[PathSegment]],
    original_rows: Sequence[Row],
    edited_rows: Sequence[Row],
    config: Optional[EditorConfig] = None,
) -> str:
    """Apply edited rows to the object at ``path`` and return the new document text.

    Each keyed row has its text coerced to the row's type and is written
    under its (possibly renamed) key; a rename removes the old key first.
    Array/object placeholder rows are only ever moved by a rename.

    Raises:
        ParseError: ``document_text`` is not valid JSON.
        PathNotFoundError: ``path`` does not resolve and ``config.strict_paths`` is set.
        PatchTargetError: keyed rows would be written into a non-object.
    """
    config = config or DEFAULT_CONFIG
    doc = parse_document(document_text)
    target = resolve_path(doc, path, strict=config.strict_paths) if path else doc

    for row, original in pair_rows(original_rows, edited_rows, config.row_matching):
        if not row.key:
            continue

        if not isinstance(target, dict):
            raise PatchTargetError(
                f"Cannot write key {row.key!r}: {format_path(path)} is not an object"
            )

        old_key = original.key if original is not None else None
        renamed = bool(old_key) and old_key != row.key

        if row.type.is_leaf:
            value = coerce_value(row.type, value_to_text(row.value))
        elif renamed and old_key in target:
            value = target[old_key]
        else:
            continue

        if renamed:
            target.pop(old_key, None)
        target[row.key] = value

    return serialize_document(doc, config)
