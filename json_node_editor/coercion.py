from __future__ import annotations

import logging
import math
import re
from typing import Any, Callable, Dict, Union

from .rows import FieldType

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r'^[+-]?\d+$')
_FLOAT_RE = re.compile(r'^[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?$')


def parse_number(text: str) -> Union[int, float, None]:
    """Parse a decimal numeric literal, or return None when it is not one."""
    candidate = text.strip()
    if _INT_RE.match(candidate):
        return int(candidate)
    if _FLOAT_RE.match(candidate):
        number = float(candidate)
        if math.isfinite(number):
            return number
    return None


def _coerce_number(text: str) -> Any:
    number = parse_number(text)
    if number is None:
        logger.debug("Keeping non-numeric text %r for number field", text)
        return text
    return number


_COERCERS: Dict[FieldType, Callable[[str], Any]] = {
    FieldType.NUMBER: _coerce_number,
    FieldType.BOOLEAN: lambda text: text == "true",
    FieldType.NULL: lambda text: None,
}


def coerce_value(field_type: Union[FieldType, str], text: str) -> Any:
    """Convert edited text to the value implied by the row's type.

    Numbers that do not parse keep their text. Booleans are true only for
    the exact text ``true``. Null ignores the text. Every other type keeps
    the text as-is.
    """
    coercer = _COERCERS.get(FieldType(field_type))
    if coercer is None:
        return text
    return coercer(text)
