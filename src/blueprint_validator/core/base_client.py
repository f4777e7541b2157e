"""Base client interface and collaborator protocols."""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, Protocol, TYPE_CHECKING
import structlog

if TYPE_CHECKING:
    from blueprint_validator.models.blueprint_models import ModuleInfo

logger = structlog.get_logger(__name__)


class BaseClient(ABC):
    """Abstract base class for all external service clients."""

    def __init__(self, config: Dict[str, Any], name: Optional[str] = None):
        self.config = config
        self.name = name or self.__class__.__name__
        self._connected = False
        self.logger = logger.bind(client=self.name)

    @abstractmethod
    def connect(self) -> None:
        """Establish connection to the external service."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Close connection to the external service."""
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """Check if the client connection is healthy."""
        pass

    @property
    def is_connected(self) -> bool:
        """Check if client is connected."""
        return self._connected

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.disconnect()


class PreconditionProvider(Protocol):
    """Live cloud queries backing the precondition validators.

    Each method returns ``None`` when the identifier exists and raises
    ``PreconditionException`` otherwise. No distinction is made between a
    missing identifier and a failed query.
    """

    def project_exists(self, project_id: str) -> None: ...

    def region_exists(self, project_id: str, region: str) -> None: ...

    def zone_exists(self, project_id: str, zone: str) -> None: ...

    def zone_in_region(self, project_id: str, zone: str, region: str) -> None: ...


class ModuleInfoProvider(Protocol):
    """Reads the inputs and outputs a module source declares."""

    def get_module_info(self, source: str, kind: str) -> "ModuleInfo": ...
