# src/blueprint_validator/validation/orchestrator.py
"""Top-level orchestrator running the validation stages in order."""

from typing import List, Optional
import structlog

from blueprint_validator.core.base_client import ModuleInfoProvider, PreconditionProvider
from blueprint_validator.core.exceptions import BlueprintException
from blueprint_validator.models.blueprint_models import BlueprintConfig
from .base import ValidationStage
from .dispatch import ValidatorDispatcher
from .preconditions import build_registry
from .references import LiteralReferenceResolver
from .resources import ResourceValidator, SettingsValidator
from .variables import GlobalVariableChecker

logger = structlog.get_logger(__name__)


class BlueprintValidator:
    """
    Runs the validation suite over a blueprint.

    Stages run in a fixed order: global variables, precondition validators,
    resource structure, resource settings. Variables are checked before the
    validators because the validators read them. The first stage to fail
    ends the run; its exception is re-raised unchanged.
    """

    def __init__(self, blueprint: BlueprintConfig,
                 module_provider: ModuleInfoProvider,
                 precondition_provider: Optional[PreconditionProvider] = None):
        self.blueprint = blueprint
        self.module_provider = module_provider
        self.precondition_provider = precondition_provider
        self.logger = logger.bind(blueprint=blueprint.blueprint_name or "<unnamed>")

    def build_stages(self) -> List[ValidationStage]:
        registry = None
        if self.precondition_provider is not None:
            resolver = LiteralReferenceResolver(self.blueprint.vars)
            registry = build_registry(resolver, self.precondition_provider)

        return [
            GlobalVariableChecker(),
            ValidatorDispatcher(registry),
            ResourceValidator(self.module_provider),
            SettingsValidator(self.module_provider),
        ]

    def validate(self) -> None:
        self.logger.info("Starting blueprint validation")

        for stage in self.build_stages():
            try:
                stage.run(self.blueprint)
            except BlueprintException as e:
                self.logger.error("Validation stage failed", stage=stage.get_stage_name(), error=e.message)
                raise
            self.logger.debug("Validation stage passed", stage=stage.get_stage_name())

        self.logger.info("Blueprint validation completed successfully")


def validate_blueprint(blueprint: BlueprintConfig,
                       module_provider: ModuleInfoProvider,
                       precondition_provider: Optional[PreconditionProvider] = None) -> None:
    """Validate a blueprint, raising the first stage failure."""
    BlueprintValidator(blueprint, module_provider, precondition_provider).validate()
