from .exceptions import *
from .base_client import BaseClient, ModuleInfoProvider, PreconditionProvider
from .utils import build_processors, setup_logging, resource_to_yaml

__all__ = [
    "BaseClient",
    "ModuleInfoProvider",
    "PreconditionProvider",
    "BlueprintException",
    "ConfigurationException",
    "ClientConnectionException",
    "VariableValidationException",
    "ReferenceResolutionException",
    "NotAStringReferenceException",
    "NotAVariableReferenceException",
    "NotAGlobalVariableException",
    "GlobalVariableNotFoundException",
    "GlobalVariableTypeException",
    "InputContractException",
    "ValidatorImplementationException",
    "PreconditionException",
    "ValidationFailedException",
    "ResourceValidationException",
    "SettingsValidationException",
    "ModuleSourceException",
    "build_processors",
    "setup_logging",
    "resource_to_yaml",
]
