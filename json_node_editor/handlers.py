from __future__ import annotations

import logging
from typing import Any, List, Optional

import gradio as gr

from .config import EditorConfig
from .errors import NodeEditError
from .graph import build_node, iter_nodes
from .io_utils import read_json_text, write_document
from .patching import parse_document
from .paths import ROOT_LOCATOR, format_path, parse_path
from .rows import FieldType, Node, Row, normalize_rows, value_to_text
from .session import DocumentStore, NodeEditSession

logger = logging.getLogger(__name__)

TABLE_HEADERS = ["Key", "Type", "Value"]


def rows_to_table(rows: List[Row]) -> List[List[str]]:
    return [[row.key or "", row.type.value, value_to_text(row.value)] for row in rows]


def _table_records(table) -> List[list]:
    if table is None:
        return []
    try:
        return table.values.tolist()
    except AttributeError:
        return [list(r) for r in table]


def _record_type(record) -> FieldType:
    try:
        ftype = FieldType(str(record[1]).strip())
    except (IndexError, ValueError):
        return FieldType.STRING
    return ftype if ftype.is_leaf else FieldType.STRING


def table_to_rows(node_rows: List[Row], table) -> List[Row]:
    """Rebuild edited rows from the table.

    The first table rows line up with ``node_rows``. Rows added below them
    become new fields typed by their Type column (``string`` if unknown).
    """
    edited: List[Row] = []
    records = _table_records(table)
    for row, record in zip(node_rows, records):
        key = record[0] if len(record) > 0 else row.key
        value = record[2] if len(record) > 2 else row.value
        key = "" if key is None else str(key)
        edited.append(row.copy(key=key or None, value=value if row.type.is_leaf else row.value))
    for record in records[len(node_rows):]:
        key = "" if not record or record[0] is None else str(record[0]).strip()
        value = record[2] if len(record) > 2 and record[2] is not None else ""
        edited.append(Row(key=key or None, value=value, type=_record_type(record)))
    return edited


def list_node_locators(data: Any) -> List[str]:
    return [node.id for node in iter_nodes(data)]


def _node_view(node: Node):
    return normalize_rows(node.rows), format_path(node.path), rows_to_table(node.rows)


def load_document_handler(file_obj):
    try:
        text = read_json_text(file_obj)
    except ValueError as e:
        return None, False, gr.update(choices=[], value=None), f"Error parsing JSON: {str(e)}", "", ROOT_LOCATOR, []
    except OSError as e:
        return None, False, gr.update(choices=[], value=None), f"Error reading file: {str(e)}", "", ROOT_LOCATOR, []

    data = parse_document(text)
    locators = list_node_locators(data)
    node = build_node(data, [])
    content, locator, table = _node_view(node)
    message = f"Successfully loaded. Found {len(locators)} nodes."
    return text, False, gr.update(choices=locators, value=ROOT_LOCATOR), message, content, locator, table


def select_node_handler(document_text: Optional[str], locator: Optional[str]):
    """Show the content, locator and rows of the node at ``locator``."""
    if document_text is None:
        return "", ROOT_LOCATOR, [], "No document loaded."
    try:
        node = build_node(parse_document(document_text), parse_path(locator))
    except NodeEditError as e:
        return "", locator or ROOT_LOCATOR, [], f"Error selecting node: {str(e)}"
    content, locator, table = _node_view(node)
    return content, locator, table, f"Selected {locator}"


def start_edit_handler():
    return gr.update(interactive=True), gr.update(visible=False), gr.update(visible=True), gr.update(visible=True)


def view_mode_handler():
    return gr.update(interactive=False), gr.update(visible=True), gr.update(visible=False), gr.update(visible=False)


def _view_mode_buttons():
    return gr.update(visible=True), gr.update(visible=False), gr.update(visible=False)


def cancel_edit_handler(document_text: Optional[str], locator: Optional[str]):
    """Discard table edits and restore the node's rows."""
    _, _, table, message = select_node_handler(document_text, locator)
    if document_text is not None:
        message = "Edits discarded."
    return (gr.update(value=table, interactive=False), *_view_mode_buttons(), message)


def save_edit_handler(document_text: Optional[str], has_changes: bool, locator: Optional[str], table, strict_paths: bool = False):
    """Commit the edited table to the document.

    On failure the document, the table and edit mode are all left as they
    were and only the status message changes.
    """
    unchanged = (gr.update(), gr.update(), gr.update(), gr.update(), gr.update(), gr.update(), gr.update())
    if document_text is None:
        return (None, has_changes, *unchanged, "No document loaded.")

    config = EditorConfig(strict_paths=bool(strict_paths))
    store = DocumentStore(contents=document_text, has_changes=bool(has_changes))
    try:
        node = build_node(store.parsed(), parse_path(locator), strict=config.strict_paths)
    except NodeEditError as e:
        logger.warning("Cannot save edits for %s", locator, exc_info=e)
        return (document_text, has_changes, *unchanged, f"Error saving node: {str(e)}")

    session = NodeEditSession(store, node, config=config)
    session.start_edit()
    session.rows = table_to_rows(node.rows, table)
    if not session.save():
        return (document_text, has_changes, *unchanged, f"Error saving node: {str(session.last_error)}")

    data = store.parsed()
    locators = list_node_locators(data)
    new_locator = node.id if node.id in locators else ROOT_LOCATOR
    content, new_locator, new_table = _node_view(build_node(data, parse_path(new_locator)))
    return (
        store.contents,
        store.has_changes,
        content,
        new_locator,
        gr.update(value=new_table, interactive=False),
        gr.update(choices=locators, value=new_locator),
        *_view_mode_buttons(),
        "Saved. Document has unsaved changes.",
    )


def export_document_handler(document_text: Optional[str], file_name: Optional[str]):
    if document_text is None:
        return None, "No document loaded."
    try:
        path = write_document(document_text, file_name)
    except OSError as e:
        return None, f"Error during export: {str(e)}"
    return path, f"Export successful! Saved to {path}"
