"""Typed field rows and their read-only display form.

A node of the document is shown as a flat list of rows, one per field.
Scalar fields carry their raw value; nested arrays and objects are kept
as placeholder rows so they can be listed, but they never take part in
the display object or in direct value edits.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from .paths import Path, format_path


class FieldType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_leaf(self) -> bool:
        return self not in (FieldType.ARRAY, FieldType.OBJECT)


@dataclass
class Row:
    """One field of a node.

    ``key`` is None for the single unnamed row of a scalar node. ``row_id``
    is assigned when rows are built from the document and stays with the
    row through edits, so saves can pair edited rows with their originals
    even if the list is reordered.
    """

    key: Optional[str]
    value: Any
    type: FieldType = FieldType.STRING
    row_id: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.type, FieldType):
            self.type = FieldType(self.type)

    def copy(self, **changes) -> "Row":
        return replace(self, **changes)


@dataclass(frozen=True)
class Node:
    id: str
    path: Path = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)


def field_type_of(value: Any) -> FieldType:
    # bool before int: bool subclasses int
    if isinstance(value, bool):
        return FieldType.BOOLEAN
    if value is None:
        return FieldType.NULL
    if isinstance(value, (int, float)):
        return FieldType.NUMBER
    if isinstance(value, dict):
        return FieldType.OBJECT
    if isinstance(value, list):
        return FieldType.ARRAY
    return FieldType.STRING


def value_to_text(value: Any) -> str:
    """Plain text form of a raw value: ``true``, ``null``, ``42``, unquoted strings."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(',', ':'))
    return str(value)


def rows_from_value(value: Any, path: Optional[Sequence] = None) -> List[Row]:
    """Build the row list for the value addressed by ``path``.

    - object: one row per key; nested arrays/objects become placeholder
      rows whose value is the child's length.
    - scalar: a single unnamed row.
    - array: no rows, its elements are nodes of their own.
    """
    prefix = format_path(path)
    if isinstance(value, dict):
        rows: List[Row] = []
        for idx, (key, child) in enumerate(value.items()):
            ftype = field_type_of(child)
            raw = child if ftype.is_leaf else len(child)
            rows.append(Row(key=key, value=raw, type=ftype, row_id=f"{prefix}#{idx}"))
        return rows
    if isinstance(value, list):
        return []
    return [Row(key=None, value=value, type=field_type_of(value), row_id=f"{prefix}#0")]


def normalize_rows(rows: Optional[Sequence[Row]]) -> str:
    """Return the read-only display text for a node's rows.

    ``{}`` for no rows, the bare value text for a single unnamed row, and
    otherwise an indented JSON object of the keyed scalar rows.
    """
    if not rows:
        return "{}"
    if len(rows) == 1 and not rows[0].key:
        return value_to_text(rows[0].value)

    obj: Dict[str, Any] = {}
    for row in rows:
        if row.type.is_leaf and row.key:
            obj[row.key] = row.value
    return json.dumps(obj, indent=2, ensure_ascii=False)
