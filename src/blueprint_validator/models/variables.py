"""Classification of loosely typed global variable values."""

from enum import Enum
from typing import Any


class VarKind(str, Enum):
    """Tag for the shape of a global variable value."""
    STRING = "string"
    MAPPING = "mapping"
    NULL = "null"
    OTHER = "other"


def classify_value(value: Any) -> VarKind:
    """Return the tag for a global variable value.

    Only string-keyed dictionaries count as mappings; a dict with any other
    key type is ``OTHER``.
    """
    if value is None:
        return VarKind.NULL
    if isinstance(value, str):
        return VarKind.STRING
    if isinstance(value, dict):
        if all(isinstance(key, str) for key in value):
            return VarKind.MAPPING
        return VarKind.OTHER
    return VarKind.OTHER
