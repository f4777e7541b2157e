"""Custom exceptions for the blueprint validator."""

from typing import Optional, Dict, Any, Iterable


class BlueprintException(Exception):
    """Base exception for blueprint validation."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationException(BlueprintException):
    """Raised when tool configuration or a blueprint document is invalid."""
    pass


class ClientConnectionException(BlueprintException):
    """Raised when client connections fail."""

    def __init__(self, client_type: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.client_type = client_type
        super().__init__(f"{client_type} connection failed: {message}", details)


class VariableValidationException(BlueprintException):
    """Raised when the global variable table has an invalid shape."""

    def __init__(self, message: str, key: Optional[str] = None):
        self.key = key
        super().__init__(message, {"key": key} if key else None)


# Literal reference resolution

class ReferenceResolutionException(BlueprintException):
    """Raised when a validator input cannot be resolved to a literal string."""

    def __init__(self, reference: Any, message: str):
        self.reference = reference
        super().__init__(message, {"reference": reference})


class NotAStringReferenceException(ReferenceResolutionException):
    """Raised when a reference value is not a string."""

    def __init__(self, reference: Any):
        super().__init__(reference, f"the value {reference!r} cannot be cast to a string")


class NotAVariableReferenceException(ReferenceResolutionException):
    """Raised when a string is not of the form ((source.name))."""

    def __init__(self, reference: str):
        super().__init__(reference, f"the value {reference} is not a variable reference")


class NotAGlobalVariableException(ReferenceResolutionException):
    """Raised when a reference points somewhere other than the global variables."""

    def __init__(self, reference: str):
        super().__init__(reference, f"the value {reference} is not a global variable")


class GlobalVariableNotFoundException(ReferenceResolutionException):
    """Raised when a referenced global variable is not defined."""

    def __init__(self, reference: str):
        super().__init__(reference, f"the global variable {reference} was not defined")


class GlobalVariableTypeException(ReferenceResolutionException):
    """Raised when a referenced global variable is not a string."""

    def __init__(self, reference: str):
        super().__init__(reference, f"the global variable {reference} is not a string")


# Precondition validators

class InputContractException(BlueprintException):
    """Raised when a validator receives a different set of inputs than it requires."""

    def __init__(self, validator: str, missing: Iterable[str] = (), surplus: Iterable[str] = ()):
        self.validator = validator
        self.missing = sorted(missing)
        self.surplus = sorted(surplus)

        if self.missing:
            message = f"at least one required input was not provided to {validator}: {', '.join(self.missing)}"
        else:
            message = f"unexpected inputs were provided to {validator}: {', '.join(self.surplus)}"
        if self.missing and self.surplus:
            message += f"; unexpected inputs: {', '.join(self.surplus)}"

        super().__init__(message, {"missing": self.missing, "surplus": self.surplus})


class ValidatorImplementationException(BlueprintException):
    """Raised when an invocation is routed to the wrong validator implementation."""

    def __init__(self, implementation: str, requested: str):
        self.implementation = implementation
        self.requested = requested
        super().__init__(f"passed wrong validator {requested} to {implementation} implementation")


class PreconditionException(BlueprintException):
    """Raised when the cloud provider reports a missing or inconsistent identifier."""
    pass


class ValidationFailedException(BlueprintException):
    """Raised when at least one precondition validator failed at ERROR level."""

    def __init__(self, errors: int = 0, warnings: int = 0):
        self.errors = errors
        self.warnings = warnings
        super().__init__(
            "validation failed due to the issues listed above",
            {"errors": errors, "warnings": warnings}
        )


# Resources and settings

class ResourceValidationException(BlueprintException):
    """Raised when a resource or group is structurally invalid."""

    def __init__(self, message: str, resource_id: Optional[str] = None):
        self.resource_id = resource_id
        super().__init__(message, {"resource_id": resource_id} if resource_id else None)


class SettingsValidationException(BlueprintException):
    """Raised when a resource supplies a setting its module does not accept."""

    def __init__(self, message: str, resource_id: Optional[str] = None, setting: Optional[str] = None):
        self.resource_id = resource_id
        self.setting = setting
        super().__init__(message, {"resource_id": resource_id, "setting": setting})


class ModuleSourceException(BlueprintException):
    """Raised when module metadata cannot be obtained for a module source."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(message, {"source": source})
