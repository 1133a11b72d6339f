"""Tests for node building and enumeration."""

from __future__ import annotations

import pytest

from json_node_editor.errors import PathNotFoundError
from json_node_editor.graph import build_node, iter_nodes
from json_node_editor.rows import FieldType, normalize_rows


@pytest.fixture
def doc() -> dict:
    return {"customer": {"name": "Alice", "orders": [{"id": 1}, "gift"]}, "active": True}


class TestBuildNode:
    def test_root_node(self, doc: dict) -> None:
        node = build_node(doc)
        assert node.id == "$"
        assert node.path == []
        assert [r.key for r in node.rows] == ["customer", "active"]
        assert node.rows[0].type is FieldType.OBJECT

    def test_nested_node(self, doc: dict) -> None:
        node = build_node(doc, ["customer"])
        assert node.id == '$["customer"]'
        assert [(r.key, r.type) for r in node.rows] == [
            ("name", FieldType.STRING),
            ("orders", FieldType.ARRAY),
        ]

    def test_scalar_array_element(self, doc: dict) -> None:
        node = build_node(doc, ["customer", "orders", 1])
        assert normalize_rows(node.rows) == "gift"

    def test_path_is_copied(self, doc: dict) -> None:
        path = ["customer"]
        node = build_node(doc, path)
        path.append("x")
        assert node.path == ["customer"]

    def test_missing_path_raises(self, doc: dict) -> None:
        with pytest.raises(PathNotFoundError):
            build_node(doc, ["customer", "missing"])

    def test_lenient_missing_path_uses_root_rows(self, doc: dict) -> None:
        node = build_node(doc, ["gone"], strict=False)
        assert node.id == '$["gone"]'
        assert node.path == ["gone"]
        assert [r.key for r in node.rows] == ["customer", "active"]


class TestIterNodes:
    def test_document_order(self, doc: dict) -> None:
        assert [n.id for n in iter_nodes(doc)] == [
            "$",
            '$["customer"]',
            '$["customer"]["orders"]',
            '$["customer"]["orders"][0]',
            '$["customer"]["orders"][1]',
        ]

    def test_array_node_has_no_rows(self, doc: dict) -> None:
        nodes = {n.id: n for n in iter_nodes(doc)}
        assert nodes['$["customer"]["orders"]'].rows == []

    def test_object_scalars_are_rows_not_nodes(self) -> None:
        assert [n.id for n in iter_nodes({"a": 1, "b": "x"})] == ["$"]

    def test_scalar_document(self) -> None:
        nodes = list(iter_nodes(42))
        assert len(nodes) == 1
        assert normalize_rows(nodes[0].rows) == "42"

    def test_nodes_match_build_node(self, doc: dict) -> None:
        for node in iter_nodes(doc):
            assert build_node(doc, node.path) == node
