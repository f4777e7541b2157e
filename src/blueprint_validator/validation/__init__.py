"""
Blueprint validation engine.

Stages, in the order the orchestrator runs them:

- variables: global variable sanity checks
- dispatch: precondition validators against the cloud provider
- resources: structural checks on each resource and its outputs
- resources (settings): settings checked against module inputs
"""

from .base import StageFailurePolicy, ValidationStage
from .dispatch import DispatchReport, ValidatorDispatcher, REMEDIATION_GUIDANCE
from .inputs import check_inputs
from .orchestrator import BlueprintValidator, validate_blueprint
from .preconditions import (
    PreconditionValidator,
    ProjectExistsValidator,
    RegionExistsValidator,
    ZoneExistsValidator,
    ZoneInRegionValidator,
    build_registry,
)
from .references import LiteralReferenceResolver
from .resources import (
    ResourceValidator,
    SettingsValidator,
    check_group_name,
    check_outputs,
    check_resource,
    check_settings,
)
from .variables import GlobalVariableChecker

__all__ = [
    "BlueprintValidator",
    "validate_blueprint",
    "StageFailurePolicy",
    "ValidationStage",
    "GlobalVariableChecker",
    "ValidatorDispatcher",
    "DispatchReport",
    "REMEDIATION_GUIDANCE",
    "PreconditionValidator",
    "ProjectExistsValidator",
    "RegionExistsValidator",
    "ZoneExistsValidator",
    "ZoneInRegionValidator",
    "build_registry",
    "LiteralReferenceResolver",
    "check_inputs",
    "ResourceValidator",
    "SettingsValidator",
    "check_group_name",
    "check_resource",
    "check_outputs",
    "check_settings",
]
