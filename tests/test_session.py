"""Tests for NodeEditSession: edit, cancel and save against a DocumentStore."""

from __future__ import annotations

import json
import logging

import pytest

from json_node_editor.config import EditorConfig
from json_node_editor.errors import ParseError, PathNotFoundError
from json_node_editor.graph import build_node
from json_node_editor.session import DocumentStore, NodeEditSession


@pytest.fixture
def store(customer_text: str) -> DocumentStore:
    return DocumentStore(contents=customer_text)


@pytest.fixture
def session(store: DocumentStore) -> NodeEditSession:
    return NodeEditSession(store, build_node(store.parsed(), ["customer"]))


class TestReadOnlyView:
    def test_display_text(self, session: NodeEditSession) -> None:
        assert session.display_text() == json.dumps({"name": "Alice", "age": 30}, indent=2)

    def test_locator(self, session: NodeEditSession) -> None:
        assert session.locator() == '$["customer"]'

    def test_starts_in_view_mode(self, session: NodeEditSession) -> None:
        assert session.editing is False


class TestEditing:
    def test_update_requires_edit_mode(self, session: NodeEditSession) -> None:
        with pytest.raises(RuntimeError):
            session.update_row(0, value="Bob")

    def test_update_touches_copy_only(self, session: NodeEditSession) -> None:
        session.start_edit()
        session.update_row(0, value="Bob")
        assert session.rows[0].value == "Bob"
        assert session.node.rows[0].value == "Alice"

    def test_update_key(self, session: NodeEditSession) -> None:
        session.start_edit()
        row = session.update_row(1, key="years")
        assert row.key == "years"
        assert row.value == 30

    def test_placeholder_value_not_editable(self) -> None:
        store = DocumentStore(contents=json.dumps({"tags": ["a"]}))
        session = NodeEditSession(store, build_node(store.parsed()))
        session.start_edit()
        with pytest.raises(ValueError):
            session.update_row(0, value="x")

    def test_cancel_restores_rows(self, session: NodeEditSession, store: DocumentStore, customer_text: str) -> None:
        session.start_edit()
        session.update_row(0, key="nick", value="Bob")
        session.cancel()
        assert session.editing is False
        assert (session.rows[0].key, session.rows[0].value) == ("name", "Alice")
        assert store.contents == customer_text
        assert store.has_changes is False


class TestSave:
    def test_save_writes_back(self, session: NodeEditSession, store: DocumentStore) -> None:
        session.start_edit()
        session.update_row(0, value="Bob")
        session.update_row(1, value="31")
        assert session.save() is True
        assert json.loads(store.contents) == {"customer": {"name": "Bob", "age": 31}}
        assert store.has_changes is True
        assert session.editing is False

    def test_save_rename(self, session: NodeEditSession, store: DocumentStore) -> None:
        session.start_edit()
        session.update_row(1, key="years")
        assert session.save()
        assert json.loads(store.contents) == {"customer": {"name": "Alice", "years": 30}}

    def test_invalid_document_keeps_edit_mode(
        self, session: NodeEditSession, store: DocumentStore, caplog: pytest.LogCaptureFixture
    ) -> None:
        store.set_contents("{not json", has_changes=False)
        session.start_edit()
        session.update_row(0, value="Bob")
        with caplog.at_level(logging.WARNING, logger="json_node_editor.session"):
            assert session.save() is False
        assert session.editing is True
        assert store.contents == "{not json"
        assert store.has_changes is False
        assert isinstance(session.last_error, ParseError)
        assert session.rows[0].value == "Bob"
        assert "Failed to save node edits" in caplog.text

    def test_stale_path_lenient_edits_root(self, session: NodeEditSession, store: DocumentStore) -> None:
        store.set_contents('{"other": 1}', has_changes=False)
        session.start_edit()
        assert session.save()
        assert json.loads(store.contents) == {"other": 1, "name": "Alice", "age": 30}

    def test_stale_path_strict_fails(self, store: DocumentStore) -> None:
        session = NodeEditSession(store, build_node(store.parsed(), ["customer"]), EditorConfig(strict_paths=True))
        store.set_contents('{"other": 1}', has_changes=False)
        session.start_edit()
        assert session.save() is False
        assert isinstance(session.last_error, PathNotFoundError)
        assert store.contents == '{"other": 1}'

    def test_successful_save_clears_last_error(self, session: NodeEditSession, store: DocumentStore, customer_text: str) -> None:
        store.set_contents("[", has_changes=False)
        session.start_edit()
        assert not session.save()
        store.set_contents(customer_text, has_changes=False)
        assert session.save()
        assert session.last_error is None


class TestDocumentStore:
    def test_defaults(self) -> None:
        store = DocumentStore()
        assert store.parsed() == {}
        assert store.has_changes is False

    def test_set_contents_marks_changes(self) -> None:
        store = DocumentStore()
        store.set_contents('{"a": 1}')
        assert store.has_changes is True
        assert store.parsed() == {"a": 1}
