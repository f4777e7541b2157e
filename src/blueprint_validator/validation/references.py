"""Resolve literal variable references to their string values."""

import re
from typing import Any, Dict

from blueprint_validator.core.exceptions import (
    GlobalVariableNotFoundException,
    GlobalVariableTypeException,
    NotAGlobalVariableException,
    NotAStringReferenceException,
    NotAVariableReferenceException,
)
from blueprint_validator.models.variables import VarKind, classify_value

LITERAL_REFERENCE = re.compile(r"^\(\(\s*([A-Za-z0-9_-]+)\.([A-Za-z0-9_-]+)\s*\)\)$")
GLOBAL_VARIABLE_SOURCE = "var"


class LiteralReferenceResolver:
    """Looks up ``((var.name))`` references in the global variable table.

    The expand pass has normally resolved everything else already, so only
    the ``var`` source is accepted here.
    """

    def __init__(self, variables: Dict[str, Any]):
        self.variables = variables

    def resolve(self, reference: Any) -> str:
        """Return the string value of a global variable reference."""
        if not isinstance(reference, str):
            raise NotAStringReferenceException(reference)

        match = LITERAL_REFERENCE.match(reference)
        if match is None:
            raise NotAVariableReferenceException(reference)

        source, name = match.groups()
        if source != GLOBAL_VARIABLE_SOURCE:
            raise NotAGlobalVariableException(reference)

        if name not in self.variables:
            raise GlobalVariableNotFoundException(reference)

        value = self.variables[name]
        if classify_value(value) is not VarKind.STRING:
            raise GlobalVariableTypeException(reference)
        return value
