from .blueprint_models import *
from .variables import *
from .loader import load_blueprint, parse_blueprint, default_validators

__all__ = [
    "BlueprintConfig",
    "ResourceGroup",
    "Resource",
    "ModuleInfo",
    "VarInfo",
    "ValidatorInvocation",
    "ValidationLevel",
    "ValidatorName",
    "ModuleKind",
    "is_valid_kind",
    "VarKind",
    "classify_value",
    "load_blueprint",
    "parse_blueprint",
    "default_validators",
]
