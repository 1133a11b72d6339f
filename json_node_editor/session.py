"""Edit/save/cancel state for one selected node.

The session owns a transient copy of the node's rows. Edits only touch
that copy; ``save`` commits it to the injected ``DocumentStore`` and
``cancel`` throws it away.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from .config import DEFAULT_CONFIG, EditorConfig
from .errors import NodeEditError
from .patching import apply_edits, parse_document
from .paths import format_path
from .rows import Node, Row, normalize_rows

logger = logging.getLogger(__name__)


@dataclass
class DocumentStore:
    """Holder of the authoritative document text and its unsaved-changes flag."""

    contents: str = "{}"
    has_changes: bool = False

    def set_contents(self, contents: str, has_changes: bool = True) -> None:
        self.contents = contents
        self.has_changes = has_changes

    def parsed(self) -> Any:
        return parse_document(self.contents)


class NodeEditSession:
    def __init__(self, store: DocumentStore, node: Node, config: Optional[EditorConfig] = None):
        self.store = store
        self.node = node
        self.config = config or DEFAULT_CONFIG
        self.editing = False
        self.rows: List[Row] = self._fresh_rows()
        self.last_error: Optional[NodeEditError] = None

    def _fresh_rows(self) -> List[Row]:
        return [row.copy() for row in self.node.rows]

    def display_text(self) -> str:
        return normalize_rows(self.node.rows)

    def locator(self) -> str:
        return format_path(self.node.path)

    def start_edit(self) -> None:
        self.editing = True

    def update_row(self, index: int, key: Optional[str] = None, value: Any = None) -> Row:
        """Change the key and/or value of one row in the edit copy."""
        if not self.editing:
            raise RuntimeError("Call start_edit() before editing rows.")
        row = self.rows[index]
        changes = {}
        if key is not None:
            changes["key"] = key
        if value is not None:
            if not row.type.is_leaf:
                raise ValueError(f"Row {row.key!r} is a {row.type.value} and has no editable value.")
            changes["value"] = value
        self.rows[index] = row.copy(**changes)
        return self.rows[index]

    def cancel(self) -> None:
        self.rows = self._fresh_rows()
        self.editing = False
        self.last_error = None

    def save(self) -> bool:
        """Commit the edit copy to the store.

        Returns False, leaving the store untouched and the session in edit
        mode, when the save cannot be applied.
        """
        try:
            new_text = apply_edits(
                self.store.contents,
                self.node.path,
                self.node.rows,
                self.rows,
                config=self.config,
            )
        except NodeEditError as e:
            logger.warning("Failed to save node edits for %s", self.locator(), exc_info=e)
            self.last_error = e
            return False

        self.store.set_contents(new_text, has_changes=True)
        self.editing = False
        self.last_error = None
        return True
