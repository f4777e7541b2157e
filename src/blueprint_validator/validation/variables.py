"""Sanity checks for the blueprint's global variables."""

from typing import Any, Dict

from blueprint_validator.core.exceptions import VariableValidationException
from blueprint_validator.models.blueprint_models import BlueprintConfig
from blueprint_validator.models.variables import VarKind, classify_value
from .base import ValidationStage


class GlobalVariableChecker(ValidationStage):
    """Checks the shape of the global variable table."""

    def get_stage_name(self) -> str:
        return "variables"

    def run(self, blueprint: BlueprintConfig) -> None:
        self.check(blueprint.vars)

    def check(self, variables: Dict[str, Any]) -> None:
        if "project_id" not in variables:
            self.logger.warning("WARNING: No project_id in global variables")

        if "labels" in variables and classify_value(variables["labels"]) is not VarKind.MAPPING:
            raise VariableValidationException("vars.labels must be a map", key="labels")

        for key, value in variables.items():
            if classify_value(value) is VarKind.NULL:
                raise VariableValidationException(f"global variable {key} was not set", key=key)
