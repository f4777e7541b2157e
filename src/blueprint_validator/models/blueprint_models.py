"""
Blueprint Data Models
Pydantic models for the parsed blueprint and the module metadata it is checked against
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Dict, Any
from enum import Enum


class ValidationLevel(str, Enum):
    """Severity policy applied to precondition validator failures."""
    ERROR = "ERROR"
    WARNING = "WARNING"
    IGNORE = "IGNORE"


class ModuleKind(str, Enum):
    """Recognized module kinds."""
    TERRAFORM = "terraform"
    PACKER = "packer"


class ValidatorName(str, Enum):
    """Names of the implemented precondition validators."""
    TEST_PROJECT_EXISTS = "test_project_exists"
    TEST_REGION_EXISTS = "test_region_exists"
    TEST_ZONE_EXISTS = "test_zone_exists"
    TEST_ZONE_IN_REGION = "test_zone_in_region"


def is_valid_kind(kind: Any) -> bool:
    """Check a kind tag against the fixed set of module kinds."""
    return kind in {k.value for k in ModuleKind}


class ValidatorInvocation(BaseModel):
    """A requested precondition check and the inputs supplied to it."""

    model_config = ConfigDict(frozen=True)

    validator: str
    inputs: Dict[str, Any] = Field(default_factory=dict)


class Resource(BaseModel):
    """One declared module instance."""

    id: str = ""
    source: str = ""
    kind: str = ""
    settings: Dict[str, Any] = Field(default_factory=dict)
    outputs: List[str] = Field(default_factory=list)


class VarInfo(BaseModel):
    """A module input variable."""

    name: str
    required: bool = False
    type: Optional[str] = None
    description: Optional[str] = None


class ModuleInfo(BaseModel):
    """Inputs accepted and outputs produced by a module source."""

    inputs: List[VarInfo] = Field(default_factory=list)
    outputs: List[str] = Field(default_factory=list)

    def get_inputs_as_map(self) -> Dict[str, bool]:
        """Map input name to its required flag."""
        return {var.name: var.required for var in self.inputs}

    def get_outputs_as_map(self) -> Dict[str, bool]:
        return {name: True for name in self.outputs}


class ResourceGroup(BaseModel):
    """A named, ordered sequence of resources.

    ``modules_info`` caches module metadata by source for this group. It is
    filled in before validation and never written by the validators.
    """

    name: str = ""
    resources: List[Resource] = Field(default_factory=list)
    modules_info: Dict[str, ModuleInfo] = Field(default_factory=dict)


class BlueprintConfig(BaseModel):
    """Root value under validation."""

    blueprint_name: str = ""
    vars: Dict[str, Any] = Field(default_factory=dict)
    validation_level: ValidationLevel = ValidationLevel.ERROR
    validators: List[ValidatorInvocation] = Field(default_factory=list)
    resource_groups: List[ResourceGroup] = Field(default_factory=list)

    @field_validator('validation_level', mode='before')
    @classmethod
    def validate_validation_level(cls, v):
        if isinstance(v, str):
            return ValidationLevel(v.upper())
        return v

    @field_validator('vars', mode='before')
    @classmethod
    def validate_vars(cls, v):
        # an empty "vars:" block loads as None
        return {} if v is None else v
