"""Tests for the top-level validation orchestrator."""

from __future__ import annotations

import pytest
from structlog.testing import LogCapture

from blueprint_validator.core.exceptions import (
    ResourceValidationException,
    SettingsValidationException,
    ValidationFailedException,
    VariableValidationException,
)
from blueprint_validator.models.blueprint_models import (
    BlueprintConfig,
    Resource,
    ResourceGroup,
    ValidationLevel,
)
from blueprint_validator.validation.base import StageFailurePolicy
from blueprint_validator.validation.orchestrator import BlueprintValidator, validate_blueprint
from tests.conftest import VPC_SOURCE
from tests.fakes.fake_provider import FakeModuleProvider, FakePreconditionProvider


class TestBlueprintValidator:
    def test_empty_blueprint_passes(self) -> None:
        blueprint = BlueprintConfig(validation_level="IGNORE")
        validate_blueprint(blueprint, FakeModuleProvider())

    def test_full_blueprint_passes(self, blueprint, module_provider, precondition_provider) -> None:
        validate_blueprint(blueprint, module_provider, precondition_provider)

        assert [call[0] for call in precondition_provider.calls] == ["project_exists", "zone_in_region"]

    def test_stage_order_and_policies(self, blueprint, module_provider, precondition_provider) -> None:
        stages = BlueprintValidator(blueprint, module_provider, precondition_provider).build_stages()

        assert [stage.get_stage_name() for stage in stages] == [
            "variables", "validators", "resources", "settings"]
        assert [stage.failure_policy for stage in stages] == [
            StageFailurePolicy.FAIL_FAST,
            StageFailurePolicy.AGGREGATE,
            StageFailurePolicy.FAIL_FAST,
            StageFailurePolicy.FAIL_FAST,
        ]

    def test_variable_failure_stops_before_validators(self, blueprint, module_provider,
                                                      precondition_provider) -> None:
        broken = blueprint.model_copy(update={"vars": {**blueprint.vars, "labels": "oops"}})

        with pytest.raises(VariableValidationException):
            validate_blueprint(broken, module_provider, precondition_provider)

        assert precondition_provider.calls == []
        assert module_provider.lookups == []

    def test_validator_failure_stops_before_resources(self, blueprint, module_provider) -> None:
        with pytest.raises(ValidationFailedException):
            validate_blueprint(blueprint, module_provider, FakePreconditionProvider())

        assert module_provider.lookups == []

    def test_warning_level_continues(self, blueprint, module_provider, log_output: LogCapture) -> None:
        lenient = blueprint.model_copy(update={"validation_level": ValidationLevel.WARNING})

        validate_blueprint(lenient, module_provider, FakePreconditionProvider())

        assert module_provider.lookups
        assert any(e["event"].startswith("warning: ") for e in log_output.entries)

    def test_structural_failure_stops_before_settings(self, blueprint, module_provider,
                                                      precondition_provider) -> None:
        blueprint.resource_groups.append(ResourceGroup(name="extra", resources=[
            Resource(id="", source=VPC_SOURCE, kind="terraform", settings={"bogus": True}),
        ]))

        with pytest.raises(ResourceValidationException):
            validate_blueprint(blueprint, module_provider, precondition_provider)

        assert module_provider.lookups == [(VPC_SOURCE, "terraform")]

    def test_settings_failure(self, blueprint, module_provider, precondition_provider,
                              log_output: LogCapture) -> None:
        blueprint.resource_groups[0].resources[1].settings["gpu_count"] = 2

        with pytest.raises(SettingsValidationException):
            validate_blueprint(blueprint, module_provider, precondition_provider)

        failed = [e for e in log_output.entries if e["event"] == "Validation stage failed"]
        assert failed[0]["stage"] == "settings"

    def test_blueprint_is_not_mutated(self, blueprint, module_provider, precondition_provider) -> None:
        before = blueprint.model_dump()
        validate_blueprint(blueprint, module_provider, precondition_provider)
        assert blueprint.model_dump() == before
