"""Value classifier — maps any runtime value to a semantic TypeTag.

classify() is total: it never raises, whatever it is given.
"""

import math
import numbers
import re
from collections.abc import Mapping
from typing import Any

from argcheck.validators.models import UNDEFINED, TypeTag
from argcheck.validators.reference_data import (
    INTEGER_PATTERN,
    PREVIEW_MAX_CHARS,
    PREVIEW_TRUNCATE_TO,
    SVG_GROUP_TAG,
)


def classify(value: Any) -> TypeTag:
    """Return the semantic type of a value."""
    if value is None:
        return TypeTag.NULL
    if value is UNDEFINED:
        return TypeTag.UNDEFINED
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, numbers.Real):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, re.Pattern):
        return TypeTag.REGEXP
    if _is_svg_group(value):
        return TypeTag.SVG_ELEMENT
    if callable(value):
        return TypeTag.FUNCTION
    if isinstance(value, (list, tuple)) or _is_array_like(value):
        return TypeTag.ARRAY
    return TypeTag.OBJECT


def _is_svg_group(value: Any) -> bool:
    """Structural check for an ElementTree-style <g> element in the SVG namespace."""
    tag = getattr(value, "tag", None)
    return isinstance(tag, str) and tag == SVG_GROUP_TAG and hasattr(value, "attrib")


def _is_array_like(value: Any) -> bool:
    """Sized, indexable from 0, and neither a mapping nor text."""
    if isinstance(value, (Mapping, str, bytes, bytearray)):
        return False
    if not hasattr(value, "__len__") or not hasattr(value, "__getitem__"):
        return False
    try:
        if len(value) == 0:
            return False
        value[0]
    except Exception:
        # A broken __len__ or __getitem__ means the value is not array-like
        return False
    return True


def is_integer_formatted(value: Any) -> bool:
    """True when the string form of value is an optionally signed run of digits."""
    return INTEGER_PATTERN.match(str(value)) is not None


def is_zero(value: Any) -> bool:
    return classify(value) is TypeTag.NUMBER and value == 0


def is_falsey(value: Any) -> bool:
    """Falsey in the scalar sense: empty containers stay truthy."""
    if value is None or value is UNDEFINED or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if classify(value) is TypeTag.NUMBER:
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def item_count(value: Any) -> int:
    """Number of items in an array or map. Objects without len count their attributes."""
    try:
        return len(value)
    except TypeError:
        return len(getattr(value, "__dict__", {}))


def preview(value: Any) -> str:
    """Short string form of a value for error messages."""
    if is_falsey(value):
        return ""
    text = str(value)
    if len(text) > PREVIEW_MAX_CHARS:
        return f"({text[:PREVIEW_TRUNCATE_TO]}...)"
    return text
