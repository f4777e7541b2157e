"""Base validation stage interface."""

from abc import ABC, abstractmethod
from enum import Enum
import structlog

from blueprint_validator.models.blueprint_models import BlueprintConfig

logger = structlog.get_logger(__name__)


class StageFailurePolicy(str, Enum):
    """How a stage reacts to a failing check."""
    FAIL_FAST = "fail_fast"
    AGGREGATE = "aggregate"


class ValidationStage(ABC):
    """Abstract base class for the stages run by the orchestrator."""

    failure_policy: StageFailurePolicy = StageFailurePolicy.FAIL_FAST

    def __init__(self):
        self.logger = logger.bind(stage=self.get_stage_name())

    @abstractmethod
    def run(self, blueprint: BlueprintConfig) -> None:
        """Check the blueprint, raising a BlueprintException on failure."""
        pass

    @abstractmethod
    def get_stage_name(self) -> str:
        pass
