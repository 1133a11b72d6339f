from __future__ import annotations

import json

import pytest

from json_node_editor.rows import FieldType, Row


@pytest.fixture
def customer_text() -> str:
    return json.dumps({"customer": {"name": "Alice", "age": 30}})


@pytest.fixture
def customer_rows() -> list[Row]:
    return [
        Row(key="name", value="Alice", type=FieldType.STRING, row_id='$["customer"]#0'),
        Row(key="age", value=30, type=FieldType.NUMBER, row_id='$["customer"]#1'),
    ]
