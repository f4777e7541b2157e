"""Precondition validators that check blueprint identifiers against the cloud provider."""

from abc import ABC, abstractmethod
from typing import Dict, FrozenSet
import structlog

from blueprint_validator.core.base_client import PreconditionProvider
from blueprint_validator.core.exceptions import (
    BlueprintException,
    PreconditionException,
    ValidatorImplementationException,
)
from blueprint_validator.models.blueprint_models import ValidatorInvocation, ValidatorName
from .inputs import check_inputs
from .references import LiteralReferenceResolver

logger = structlog.get_logger(__name__)


class PreconditionValidator(ABC):
    """A named check run against live provider state.

    ``run`` verifies the invocation was routed here, enforces the input
    contract, resolves every input to a literal string and hands the values
    to ``query``. Failures are logged with the validator name and re-raised.
    """

    name: ValidatorName
    inputs: FrozenSet[str] = frozenset()

    def __init__(self, resolver: LiteralReferenceResolver, provider: PreconditionProvider):
        self.resolver = resolver
        self.provider = provider
        self.logger = logger.bind(validator=self.name.value)

    def required_inputs(self) -> FrozenSet[str]:
        return self.inputs

    def run(self, invocation: ValidatorInvocation) -> None:
        try:
            if invocation.validator != self.name.value:
                raise ValidatorImplementationException(self.name.value, invocation.validator)

            check_inputs(invocation.validator, invocation.inputs, self.required_inputs())
            values = {
                key: self.resolver.resolve(invocation.inputs[key])
                for key in sorted(self.required_inputs())
            }
            self._query_provider(values)
        except BlueprintException as e:
            self.logger.warning(f"validator {self.name.value} failed", error=e.message)
            raise

    def _query_provider(self, values: Dict[str, str]) -> None:
        # any provider error is a failed precondition
        try:
            self.query(**values)
        except BlueprintException:
            raise
        except Exception as e:
            raise PreconditionException(
                f"{self.name.value} could not query the cloud provider: {e}",
                {"validator": self.name.value, "error_type": type(e).__name__}
            ) from e

    @abstractmethod
    def query(self, **values: str) -> None:
        """Ask the provider about the resolved identifiers."""
        pass


class ProjectExistsValidator(PreconditionValidator):
    name = ValidatorName.TEST_PROJECT_EXISTS
    inputs = frozenset({"project_id"})

    def query(self, project_id: str) -> None:
        self.provider.project_exists(project_id)


class RegionExistsValidator(PreconditionValidator):
    name = ValidatorName.TEST_REGION_EXISTS
    inputs = frozenset({"project_id", "region"})

    def query(self, project_id: str, region: str) -> None:
        self.provider.region_exists(project_id, region)


class ZoneExistsValidator(PreconditionValidator):
    name = ValidatorName.TEST_ZONE_EXISTS
    inputs = frozenset({"project_id", "zone"})

    def query(self, project_id: str, zone: str) -> None:
        self.provider.zone_exists(project_id, zone)


class ZoneInRegionValidator(PreconditionValidator):
    name = ValidatorName.TEST_ZONE_IN_REGION
    inputs = frozenset({"project_id", "region", "zone"})

    def query(self, project_id: str, region: str, zone: str) -> None:
        self.provider.zone_in_region(project_id, zone, region)


VALIDATOR_CLASSES = (
    ProjectExistsValidator,
    RegionExistsValidator,
    ZoneExistsValidator,
    ZoneInRegionValidator,
)


def build_registry(resolver: LiteralReferenceResolver,
                   provider: PreconditionProvider) -> Dict[ValidatorName, PreconditionValidator]:
    """Map every implemented validator name to its handler."""
    return {cls.name: cls(resolver, provider) for cls in VALIDATOR_CLASSES}
