"""Run the requested precondition validators under the blueprint's severity policy."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from blueprint_validator.core.exceptions import (
    BlueprintException,
    ConfigurationException,
    ValidationFailedException,
)
from blueprint_validator.models.blueprint_models import (
    BlueprintConfig,
    ValidationLevel,
    ValidatorInvocation,
    ValidatorName,
)
from .base import StageFailurePolicy, ValidationStage
from .preconditions import PreconditionValidator

REMEDIATION_GUIDANCE = """validator failures can indicate a credentials problem.
troubleshooting info appears in the README section "Supplying cloud credentials".

validation can be configured:
- treat failures as warnings by using the validate command
  with the flag "--validation-level WARNING"
- can be disabled entirely by using the validate command
  with the flag "--validation-level IGNORE"
- a custom set of validators can be configured following
  instructions in the README section "Blueprint warnings and errors"."""


@dataclass
class DispatchReport:
    """Outcome of one dispatch run."""
    executed: List[str] = field(default_factory=list)
    passed: int = 0
    warnings: int = 0
    errors: int = 0
    skipped: bool = False


class ValidatorDispatcher(ValidationStage):
    """Runs every requested validator and classifies each failure.

    Unlike the other stages this one never stops early: all invocations are
    run so a single pass reports every problem. Unknown validator names are
    always errors; other failures follow the severity policy.
    """

    failure_policy = StageFailurePolicy.AGGREGATE

    def __init__(self, registry: Optional[Dict[ValidatorName, PreconditionValidator]]):
        super().__init__()
        self.registry = registry

    def get_stage_name(self) -> str:
        return "validators"

    def run(self, blueprint: BlueprintConfig) -> None:
        self.run_all(blueprint.validators, blueprint.validation_level)

    def _lookup(self, name: str) -> Optional[PreconditionValidator]:
        try:
            return self.registry.get(ValidatorName(name))
        except ValueError:
            return None

    def run_all(self, invocations: Sequence[ValidatorInvocation],
                level: ValidationLevel) -> DispatchReport:
        report = DispatchReport()

        if level == ValidationLevel.IGNORE:
            report.skipped = True
            return report

        if invocations and self.registry is None:
            raise ConfigurationException("precondition validators were requested but no cloud provider is configured")

        for invocation in invocations:
            report.executed.append(invocation.validator)
            validator = self._lookup(invocation.validator)
            if validator is None:
                report.errors += 1
                self.logger.error(f"{invocation.validator} is not an implemented validator")
                continue

            try:
                validator.run(invocation)
            except BlueprintException as e:
                if level == ValidationLevel.WARNING:
                    report.warnings += 1
                    self.logger.warning(f"warning: {e}")
                else:
                    report.errors += 1
                    self.logger.error(f"error: {e}")
            else:
                report.passed += 1

        if report.warnings or report.errors:
            self.logger.warning(REMEDIATION_GUIDANCE)

        if report.errors:
            raise ValidationFailedException(errors=report.errors, warnings=report.warnings)

        self.logger.info("Precondition validators completed",
                         passed=report.passed, warnings=report.warnings)
        return report
