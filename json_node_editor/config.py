"""Editor settings shared by the save path and the edit session."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RowMatching(str, Enum):
    """How edited rows are paired with the rows they were copied from.

    - IDENTITY: by ``Row.row_id``; rows without an id fall back to position.
    - INDEX:    strictly by position in the row list.
    """

    IDENTITY = "identity"
    INDEX = "index"


@dataclass(frozen=True)
class EditorConfig:
    """Immutable editor configuration.

    Attributes:
        indent: Indentation used when the document is re-serialized.
        strict_paths: When True a path that does not resolve aborts the save
            instead of editing the document root.
        row_matching: Pairing strategy between edited and original rows.
        ensure_ascii: Passed through to ``json.dumps``.
    """

    indent: int = 2
    strict_paths: bool = False
    row_matching: RowMatching = RowMatching.IDENTITY
    ensure_ascii: bool = False

    def __post_init__(self) -> None:
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if not isinstance(self.row_matching, RowMatching):
            object.__setattr__(self, "row_matching", RowMatching(self.row_matching))


DEFAULT_CONFIG = EditorConfig()
