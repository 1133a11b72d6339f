from __future__ import annotations

import os
import tempfile

from .patching import parse_document


def read_json_text(file_obj) -> str:
    """Read JSON text from an uploaded file or file path and check that it parses."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
    else:
        path = file_obj.name if hasattr(file_obj, 'name') else file_obj
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()

    parse_document(content)
    return content


def write_document(text: str, file_name: str = None) -> str:
    """Write document text to a file in the temp directory and return its path."""
    if not file_name or not file_name.strip():
        file_name = "document"
    file_name = os.path.basename(file_name.strip())
    if not file_name.lower().endswith(".json"):
        file_name += ".json"

    path = os.path.join(tempfile.gettempdir(), file_name)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)
    return path
